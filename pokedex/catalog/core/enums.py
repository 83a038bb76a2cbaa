"""Core enumerations shared by tables, runtime and connectors.

Key Types:
    - ColumnType: Value type a column yields to the host engine
    - AccessMode: How a query reaches the remote collection (list or get)
    - Classification: Outcome of classifying a remote-call failure
"""

from enum import Enum


class ColumnType(str, Enum):
    """Column value types understood by the host engine."""

    STRING = "string"
    INT = "int"
    JSON = "json"


class AccessMode(str, Enum):
    """Access pattern selected for one query.

    A query never transitions between modes.
    """

    LIST = "list"
    GET = "get"


class Classification(str, Enum):
    """Outcome of classifying a remote-call failure."""

    SUPPRESS = "suppress"
    PROPAGATE = "propagate"
