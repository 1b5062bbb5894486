"""
Unit tests for FastAPI dependency injection functions.

- get_cafe_catalog_repository() builds the repository once per process
- It reads CAFE_CATALOG_PATH when set, otherwise uses the built-in catalog
- get_list_cafes_use_case() wires the use case to the repository
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import Mock

import pytest

from cafe_finder.adapters.in_memory_cafe_catalog_repository import (
    InMemoryCafeCatalogRepository,
)
from cafe_finder.entrypoints.http.dependencies import (
    get_cafe_catalog_repository,
    get_cafe_query,
    get_list_cafes_use_case,
)
from cafe_finder.entrypoints.http.dtos.cafe_query import CafeQueryDTO
from cafe_finder.infra.catalog.loader import CatalogLoadError
from cafe_finder.infra.catalog.seed import DEFAULT_CATALOG
from cafe_finder.use_cases.list_cafes import ListCafes, ListCafesRequest


@pytest.fixture(autouse=True)
def clear_repository_cache() -> Iterator[None]:
    get_cafe_catalog_repository.cache_clear()
    yield
    get_cafe_catalog_repository.cache_clear()


# ==============================================================================
# get_cafe_catalog_repository()
# ==============================================================================


def test_uses_built_in_catalog_by_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CAFE_CATALOG_PATH", raising=False)

    repository = get_cafe_catalog_repository()

    assert isinstance(repository, InMemoryCafeCatalogRepository)
    assert repository.cities() == list(DEFAULT_CATALOG)


def test_loads_configured_catalog_file(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({"kazan": ["Чак-чак"]}, ensure_ascii=False), encoding="utf-8")
    monkeypatch.setenv("CAFE_CATALOG_PATH", str(path))

    repository = get_cafe_catalog_repository()

    assert repository.cities() == ["kazan"]
    assert [cafe.name for cafe in repository.find_by_city("kazan") or ()] == ["Чак-чак"]


def test_invalid_catalog_file_fails(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("CAFE_CATALOG_PATH", str(tmp_path / "missing.json"))

    with pytest.raises(CatalogLoadError):
        get_cafe_catalog_repository()


def test_repository_is_built_once(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CAFE_CATALOG_PATH", raising=False)

    assert get_cafe_catalog_repository() is get_cafe_catalog_repository()


# ==============================================================================
# get_list_cafes_use_case()
# ==============================================================================


def test_returns_list_cafes_use_case() -> None:
    use_case = get_list_cafes_use_case(repository=Mock())

    assert isinstance(use_case, ListCafes)


def test_use_case_reads_injected_repository() -> None:
    repository = InMemoryCafeCatalogRepository({"tula": ["Самовар"]})

    use_case = get_list_cafes_use_case(repository=repository)

    assert use_case.execute(ListCafesRequest(city="tula")).names == ["Самовар"]


def test_logs_loaded_cities(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    monkeypatch.delenv("CAFE_CATALOG_PATH", raising=False)
    caplog.set_level(logging.INFO, logger="cafe_finder.entrypoints.http.dependencies")

    get_cafe_catalog_repository()

    record = next(r for r in caplog.records if r.getMessage() == "Café catalog ready")
    assert record.source == "built-in"
    assert record.cities == list(DEFAULT_CATALOG)


# ==============================================================================
# get_cafe_query()
# ==============================================================================


def test_get_cafe_query_keeps_first_values() -> None:
    dto = get_cafe_query(city=["moscow", "omsk"], count=["2", "na"], search=["кофе"])

    assert dto.model_dump() == {"city": "moscow", "count": "2", "search": "кофе"}


def test_get_cafe_query_without_parameters() -> None:
    dto = get_cafe_query(city=None, count=None, search=None)

    assert dto.model_dump() == CafeQueryDTO().model_dump()


def test_get_cafe_query_with_empty_lists() -> None:
    dto = get_cafe_query(city=[], count=[], search=[])

    assert dto.model_dump() == CafeQueryDTO().model_dump()
