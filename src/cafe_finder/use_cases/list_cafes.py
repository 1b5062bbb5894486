"""List cafés of a city use case."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from cafe_finder.domain.cafe import Cafe, InvalidCountError, UnknownCityError
from cafe_finder.ports.cafe_catalog_repository import CafeCatalogRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ListCafesRequest:
    """Raw query parameters; empty strings count as absent."""

    city: str | None = None
    count: str | None = None
    search: str | None = None


@dataclass(frozen=True, slots=True)
class ListCafesResponse:
    cafes: list[Cafe]

    @property
    def names(self) -> list[str]:
        return [cafe.name for cafe in self.cafes]


class ListCafes:
    """
    Resolves a café query against the catalog.

    Responsibilities:
    - Validate city (first) and count (second)
    - Filter by case-insensitive name substring when search is given
    - Otherwise truncate to the first `count` cafés

    Pure with respect to the catalog: nothing is written back.
    """

    def __init__(self, cafe_catalog_repository: CafeCatalogRepository) -> None:
        self._repository = cafe_catalog_repository

    def execute(self, request: ListCafesRequest) -> ListCafesResponse:
        """
        Execute the query.

        Args:
            request: City, raw count and search term

        Returns:
            ListCafesResponse with the selected cafés in catalog order

        Raises:
            UnknownCityError: If city is missing or not in the catalog
            InvalidCountError: If count is present but not a non-negative integer
        """
        cafes = self._repository.find_by_city(request.city) if request.city else None
        if cafes is None:
            raise UnknownCityError(city=request.city)

        count = self._parse_count(request.count)

        # count is validated above but does not apply to searches
        if request.search:
            selected = [cafe for cafe in cafes if cafe.matches(request.search)]
        else:
            selected = list(cafes if count is None else cafes[:count])

        logger.debug(
            "Resolved cafés",
            extra={
                "city": request.city,
                "count": count,
                "search": request.search,
                "matches": len(selected),
            },
        )

        return ListCafesResponse(cafes=selected)

    @staticmethod
    def _parse_count(raw: str | None) -> int | None:
        if not raw:
            return None
        # str.isdigit() alone accepts non-ASCII digits such as "٣"
        if not (raw.isascii() and raw.isdigit()):
            raise InvalidCountError(count=raw)
        try:
            return int(raw)
        except ValueError as exc:
            # Digit strings past the interpreter's int conversion limit
            raise InvalidCountError(count=raw) from exc
