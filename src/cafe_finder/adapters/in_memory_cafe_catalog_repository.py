from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from types import MappingProxyType

from cafe_finder.domain.cafe import Cafe
from cafe_finder.ports.cafe_catalog_repository import CafeCatalogRepository


class InMemoryCafeCatalogRepository(CafeCatalogRepository):
    """
    Immutable in-memory catalog.

    - Copies the source mapping at construction (later changes to it are not seen)
    - Stores cafés per city as tuples, in insertion order
    - Exposes a read-only view, safe to share between request threads
    """

    def __init__(self, catalog: Mapping[str, Iterable[Cafe | str]]) -> None:
        frozen: dict[str, tuple[Cafe, ...]] = {}
        for city, entries in catalog.items():
            if not city:
                raise ValueError("city key must be a non-empty string")
            frozen[city] = tuple(self._to_cafe(city, entry) for entry in entries)

        self._catalog: Mapping[str, tuple[Cafe, ...]] = MappingProxyType(frozen)

    def find_by_city(self, city: str) -> Sequence[Cafe] | None:
        return self._catalog.get(city)

    def cities(self) -> list[str]:
        return list(self._catalog)

    @staticmethod
    def _to_cafe(city: str, entry: Cafe | str) -> Cafe:
        cafe = entry if isinstance(entry, Cafe) else Cafe(name=entry)
        if not cafe.name:
            raise ValueError(f"café names in '{city}' must be non-empty")
        # Names are rendered as a comma-separated list
        if "," in cafe.name:
            raise ValueError(f"café name '{cafe.name}' must not contain a comma")
        return cafe
