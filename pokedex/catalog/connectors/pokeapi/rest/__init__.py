"""PokéAPI REST connector."""

from .provider import PokeAPIRESTConnector

__all__ = ["PokeAPIRESTConnector"]
