from .client import ChainClient
from .errors import ChainError, ExecutionReverted, RPCError

__all__ = [
    "ChainClient",
    "ChainError",
    "RPCError",
    "ExecutionReverted",
]
