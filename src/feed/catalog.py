"""
Static catalog of news sources.

The catalog is a JSON list of records ``{id, name, side, x, y}``. It is loaded
once at startup and passed explicitly to the selector; the value is read-only
for the lifetime of the process.
"""

import json
import math
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple, Union

import structlog

from .models import Side, Source
from ..exceptions import CatalogError

logger = structlog.get_logger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).parent / "data" / "sources.json"

REQUIRED_FIELDS = ("id", "name", "side", "x", "y")


class SourceCatalog:
    """Immutable, ordered collection of sources keyed by identifier"""

    def __init__(self, sources: Iterable[Source] = ()):
        ordered: List[Source] = []
        by_id: Dict[str, Source] = {}
        for source in sources:
            if source.id in by_id:
                raise CatalogError(f"Duplicate source id in catalog: {source.id}")
            by_id[source.id] = source
            ordered.append(source)

        self._sources: Tuple[Source, ...] = tuple(ordered)
        self._by_id = by_id

    @classmethod
    def from_records(cls, records: List[Dict[str, Any]]) -> "SourceCatalog":
        if not isinstance(records, list):
            raise CatalogError("Source catalog must be a JSON list of records")
        return cls(_parse_record(record, index) for index, record in enumerate(records))

    @property
    def sources(self) -> Tuple[Source, ...]:
        return self._sources

    @property
    def sides(self) -> List[Side]:
        return sorted({source.side for source in self._sources}, key=lambda side: side.value)

    def get(self, source_id: str) -> Optional[Source]:
        return self._by_id.get(source_id)

    def __contains__(self, source_id: object) -> bool:
        return source_id in self._by_id

    def __iter__(self) -> Iterator[Source]:
        return iter(self._sources)

    def __len__(self) -> int:
        return len(self._sources)

    def __repr__(self):
        return f"SourceCatalog(sources={len(self._sources)})"


def _parse_record(record: Any, index: int) -> Source:
    if not isinstance(record, dict):
        raise CatalogError(f"Catalog record {index} is not an object")

    missing = [field for field in REQUIRED_FIELDS if field not in record]
    if missing:
        raise CatalogError(f"Catalog record {index} is missing fields: {', '.join(missing)}")

    try:
        side = Side(str(record["side"]).lower())
    except ValueError as e:
        raise CatalogError(f"Catalog record {index} has unknown side: {record['side']}") from e

    try:
        x = float(record["x"])
        y = float(record["y"])
    except (TypeError, ValueError) as e:
        raise CatalogError(f"Catalog record {index} has a non-numeric coordinate") from e

    if not (math.isfinite(x) and math.isfinite(y)):
        raise CatalogError(f"Catalog record {index} has a non-finite coordinate")

    return Source(
        id=str(record["id"]),
        name=str(record["name"]),
        side=side,
        x=x,
        y=y,
    )


def load_catalog(path: Optional[Union[str, Path]] = None) -> SourceCatalog:
    catalog_path = Path(path) if path else DEFAULT_CATALOG_PATH

    try:
        with catalog_path.open(encoding="utf-8") as handle:
            records = json.load(handle)
    except FileNotFoundError as e:
        raise CatalogError(f"Source catalog not found: {catalog_path}") from e
    except json.JSONDecodeError as e:
        raise CatalogError(f"Source catalog is not valid JSON: {e}") from e

    catalog = SourceCatalog.from_records(records)
    logger.info(
        "source_catalog_loaded",
        path=str(catalog_path),
        sources=len(catalog),
        sides=[side.value for side in catalog.sides],
    )
    return catalog
