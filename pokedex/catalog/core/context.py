"""Per-query context passed explicitly through every component."""

from __future__ import annotations

import asyncio
import uuid
from dataclasses import dataclass, field


@dataclass
class QueryContext:
    """Explicit state for one query.

    Attributes:
        table: Name of the table being queried
        query_id: Identifier used to correlate log records of one query
        cancelled: Set by the host engine to stop the query early
    """

    table: str = ""
    query_id: str = field(default_factory=lambda: uuid.uuid4().hex[:12])
    cancelled: asyncio.Event = field(default_factory=asyncio.Event)

    @property
    def is_cancelled(self) -> bool:
        return self.cancelled.is_set()

    def cancel(self) -> None:
        """Request that the query stop issuing remote calls."""
        self.cancelled.set()
