"""Remote catalog connectors."""

from .pokeapi import ConnectionConfig, PokeAPIRESTConnector

__all__ = [
    "ConnectionConfig",
    "PokeAPIRESTConnector",
]
