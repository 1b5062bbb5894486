from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from cafe_finder.domain.errors import ValidationError


# ==============================================================================
# Domain Exceptions
# ==============================================================================


class UnknownCityError(ValidationError):
    """Raised when the city is missing or not present in the catalog."""

    error_code: str = "UNKNOWN_CITY"
    default_message: str = "unknown city"

    def __init__(self, city: str | None = None, **context: Any) -> None:
        super().__init__(self.default_message, city=city, **context)


class InvalidCountError(ValidationError):
    """Raised when count is present but is not a non-negative integer."""

    error_code: str = "INVALID_COUNT"
    default_message: str = "incorrect count"

    def __init__(self, count: str | None = None, **context: Any) -> None:
        super().__init__(self.default_message, count=count, **context)


@dataclass(frozen=True, slots=True)
class Cafe:
    name: str

    def matches(self, search: str) -> bool:
        """Case-insensitive substring match on the café name."""
        return search.lower() in self.name.lower()
