"""Environment-driven settings (``.env`` is honoured via python-dotenv)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .reserves import SUSHISWAP_FACTORY_ADDRESS
from .tokens import ChainId

_ENV_LOADED = False


def _load_env(env_path: Optional[Path] = None) -> None:
    global _ENV_LOADED
    if _ENV_LOADED:
        return
    load_dotenv(dotenv_path=env_path or Path.cwd() / ".env")
    _ENV_LOADED = True


def get_env(
    name: str, default: str | None = None, required: bool = False
) -> str | None:
    _load_env()
    value = os.environ.get(name, default)
    if required and (value is None or value == ""):
        raise ValueError(f"{name} env var is required")
    return value


def _parse_bool(value: str | None) -> bool:
    if value is None:
        return False
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class RouterSettings:
    rpc_urls: tuple[str, ...]
    chain_id: int = ChainId.MAINNET
    factory_address: str = SUSHISWAP_FACTORY_ADDRESS
    rpc_timeout: int = 30
    disable_multihops: bool = False

    @classmethod
    def from_env(cls) -> "RouterSettings":
        raw_urls = get_env("ROUTER_RPC_URLS", "") or ""
        rpc_urls = tuple(url.strip() for url in raw_urls.split(",") if url.strip())
        chain_id = get_env("ROUTER_CHAIN_ID", str(int(ChainId.MAINNET)))
        timeout = get_env("ROUTER_RPC_TIMEOUT", "30")
        try:
            chain_id_value = int(chain_id or ChainId.MAINNET)
            timeout_value = int(timeout or 30)
        except ValueError as exc:
            raise ValueError(
                "ROUTER_CHAIN_ID and ROUTER_RPC_TIMEOUT must be integers"
            ) from exc
        return cls(
            rpc_urls=rpc_urls,
            chain_id=chain_id_value,
            factory_address=get_env("ROUTER_FACTORY_ADDRESS")
            or SUSHISWAP_FACTORY_ADDRESS,
            rpc_timeout=timeout_value,
            disable_multihops=_parse_bool(get_env("ROUTER_DISABLE_MULTIHOPS")),
        )
