"""Source selection for a reader's bias coordinate"""

import math
from typing import List, Set, Tuple

from .catalog import SourceCatalog
from .models import Side, Source

DEFAULT_SLOT_COUNT = 4


def source_distance(source: Source, x: float, y: float) -> float:
    return math.hypot(source.x - x, source.y - y)


def rank_sources(catalog: SourceCatalog, x: float, y: float) -> List[Source]:
    """Catalog ordered by distance to (x, y), ties broken by source id."""
    return sorted(catalog, key=lambda source: _ranking_key(source, x, y))


def select_sources(
    catalog: SourceCatalog,
    x: float,
    y: float,
    slot_count: int = DEFAULT_SLOT_COUNT,
    balance_sides: bool = True,
) -> List[Source]:
    """
    Pick the sources that fill a feed for the coordinate (x, y).

    With ``balance_sides`` the nearest source of every side is taken first,
    then the remaining slots go to the nearest sources not yet picked. The
    result is ordered by distance (ties by id) and holds at most
    ``slot_count`` distinct sources; it is never longer than the catalog.
    """
    if slot_count <= 0:
        return []

    ranked = rank_sources(catalog, x, y)
    if len(ranked) <= slot_count:
        return ranked

    picked: List[Source] = []
    if balance_sides:
        seen_sides: Set[Side] = set()
        for source in ranked:
            if source.side in seen_sides:
                continue
            seen_sides.add(source.side)
            picked.append(source)
            if len(picked) == slot_count:
                break

    picked_ids = {source.id for source in picked}
    for source in ranked:
        if len(picked) == slot_count:
            break
        if source.id not in picked_ids:
            picked.append(source)
            picked_ids.add(source.id)

    return sorted(picked, key=lambda source: _ranking_key(source, x, y))


def _ranking_key(source: Source, x: float, y: float) -> Tuple[float, str]:
    return source_distance(source, x, y), source.id
