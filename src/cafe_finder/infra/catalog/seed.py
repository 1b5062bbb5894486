"""Built-in café catalog, used when no catalog file is configured."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

DEFAULT_CATALOG: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "moscow": (
            "Мир кофе",
            "Сладкоежка",
            "Кофе и завтраки",
            "Сытый студент",
            "Ложка и вилка",
        ),
        "tula": (
            "Тульский пряник",
            "Самовар",
            "Кремль",
        ),
    }
)
