"""Test configuration: import paths and a clean router environment."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROUTER_ENV_VARS = (
    "ROUTER_RPC_URLS",
    "ROUTER_CHAIN_ID",
    "ROUTER_FACTORY_ADDRESS",
    "ROUTER_RPC_TIMEOUT",
    "ROUTER_DISABLE_MULTIHOPS",
)


def _ensure_src_on_path() -> None:
    src_path = Path(__file__).resolve().parents[1] / "src"
    src_value = str(src_path)
    if src_value not in sys.path:
        sys.path.insert(0, src_value)


_ensure_src_on_path()


@pytest.fixture(autouse=True)
def _clean_router_env(monkeypatch):
    import routing.config

    # A developer .env must not leak into tests.
    monkeypatch.setattr(routing.config, "_ENV_LOADED", True)
    for name in ROUTER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
