"""Load a café catalog from a JSON file.

Expected format is a single object mapping city keys to ordered lists
of café names::

    {"moscow": ["Мир кофе", "Сладкоежка"], "tula": ["Самовар"]}
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

logger = logging.getLogger(__name__)

_catalog_adapter: TypeAdapter[dict[str, list[str]]] = TypeAdapter(dict[str, list[str]])


class CatalogLoadError(Exception):
    """Raised when a catalog file cannot be read or has the wrong shape."""


def load_catalog(path: Path) -> dict[str, list[str]]:
    """
    Read and validate a catalog file.

    Key order in the file is preserved, as is the order of each city's cafés.

    Raises:
        CatalogLoadError: If the file is missing, unreadable or malformed
    """
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise CatalogLoadError(f"cannot read catalog file '{path}': {exc}") from exc

    try:
        catalog = _catalog_adapter.validate_json(raw, strict=True)
    except PydanticValidationError as exc:
        raise CatalogLoadError(f"invalid catalog file '{path}': {exc}") from exc

    logger.info(
        "Catalog loaded",
        extra={"path": str(path), "cities": len(catalog)},
    )
    return catalog
