"""
Dependency injection for FastAPI routes.

The catalog is immutable, so the repository is built once per process
and shared; the use case holds no state of its own and is cheap to
create per request.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from fastapi import Depends, Query

from cafe_finder.adapters.in_memory_cafe_catalog_repository import (
    InMemoryCafeCatalogRepository,
)
from cafe_finder.entrypoints.http.dtos.cafe_query import CafeQueryDTO
from cafe_finder.infra.catalog.loader import load_catalog
from cafe_finder.infra.catalog.seed import DEFAULT_CATALOG
from cafe_finder.infra.config import catalog_path
from cafe_finder.ports.cafe_catalog_repository import CafeCatalogRepository
from cafe_finder.use_cases.list_cafes import ListCafes

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_cafe_catalog_repository() -> CafeCatalogRepository:
    """
    Builds the catalog repository on first use.

    Reads the file named by CAFE_CATALOG_PATH when set, otherwise
    falls back to the built-in catalog.

    Raises:
        CatalogLoadError: If the configured catalog file is invalid
    """
    path = catalog_path()
    source = "built-in" if path is None else str(path)
    repository = InMemoryCafeCatalogRepository(
        DEFAULT_CATALOG if path is None else load_catalog(path)
    )

    logger.info(
        "Café catalog ready",
        extra={"source": source, "cities": repository.cities()},
    )
    return repository


def get_list_cafes_use_case(
    repository: CafeCatalogRepository = Depends(get_cafe_catalog_repository),
) -> ListCafes:
    """
    Factory function that returns a configured ListCafes use case.

    Args:
        repository: Shared catalog repository (injected by FastAPI)

    Returns:
        ListCafes: Use case bound to the catalog
    """
    return ListCafes(cafe_catalog_repository=repository)


def _first(values: list[str] | None) -> str | None:
    return values[0] if values else None


def get_cafe_query(
    city: list[str] | None = Query(default=None, description="City key (case-sensitive)"),
    count: list[str] | None = Query(
        default=None,
        description="Maximum number of cafés (non-negative integer), ignored with search",
    ),
    search: list[str] | None = Query(
        default=None,
        description="Case-insensitive substring of the café name",
    ),
) -> CafeQueryDTO:
    """
    Collects the /cafe query parameters.

    A parameter given more than once keeps its first value
    (`?city=moscow&city=omsk` asks for moscow).

    Returns:
        CafeQueryDTO: Raw, unparsed query values
    """
    return CafeQueryDTO(city=_first(city), count=_first(count), search=_first(search))
