from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from cafe_finder.domain.cafe import Cafe


class CafeCatalogRepository(ABC):
    """
    Port for read-only catalog access.

    Contract:
        - City keys are case-sensitive
        - Cafés are returned in catalog (insertion) order
        - The catalog never changes after construction, so repeated
          lookups for the same city return equal sequences
    """

    @abstractmethod
    def find_by_city(self, city: str) -> Sequence[Cafe] | None:
        """
        Return the ordered cafés of a city.

        Args:
            city: City key (exact, case-sensitive match)

        Returns:
            Ordered cafés, or None if the city is not in the catalog
        """
        ...

    @abstractmethod
    def cities(self) -> list[str]:
        """Return all city keys in catalog order."""
        ...
