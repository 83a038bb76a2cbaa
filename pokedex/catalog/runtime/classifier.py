"""Not-found classification of remote-call failures.

The remote client reports a missing resource as a malformed-response error
instead of a distinct status, so not-found is recognised by literal substrings
of the error message. The pattern list is the only per-resource-type input.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from ..core.enums import Classification

ErrorPredicate = Callable[[BaseException], bool]


class ErrorClassifier:
    """Classifies a failure as a suppressible not-found or a genuine error."""

    def __init__(self, patterns: Iterable[str] = ()) -> None:
        self.patterns: tuple[str, ...] = tuple(p for p in patterns if p)

    def classify(self, error: BaseException) -> Classification:
        message = str(error)
        if any(pattern in message for pattern in self.patterns):
            return Classification.SUPPRESS
        return Classification.PROPAGATE

    def is_not_found(self, error: BaseException) -> bool:
        return self.classify(error) is Classification.SUPPRESS

    def __repr__(self) -> str:
        return f"ErrorClassifier(patterns={list(self.patterns)!r})"


def is_not_found_error(patterns: Iterable[str]) -> ErrorPredicate:
    """Build a predicate for a table's get config from not-found patterns.

    Example:
        >>> ignore = is_not_found_error(["404 Not Found"])
        >>> ignore(RuntimeError("404 Not Found: GET /item/x"))
        True
    """
    return ErrorClassifier(patterns).is_not_found
