"""PokéAPI connector implementation."""

from .config import ConnectionConfig
from .rest.provider import PokeAPIRESTConnector

__all__ = [
    "ConnectionConfig",
    "PokeAPIRESTConnector",
]
