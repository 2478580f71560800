"""
Feed Module
===========

The feed-assembly core of the gateway:
- Source catalog (static outlets with a side and a 2-D bias coordinate)
- Source selection for a reader's bias coordinate
- Card assembly from fetched articles, with fallback for empty slots

Nothing in this module performs I/O beyond loading the catalog file.
"""

from .models import Side, Source, Article, Card
from .catalog import SourceCatalog, load_catalog, DEFAULT_CATALOG_PATH
from .selector import select_sources, DEFAULT_SLOT_COUNT
from .assembler import assemble_cards

__all__ = [
    "Side",
    "Source",
    "Article",
    "Card",
    "SourceCatalog",
    "load_catalog",
    "DEFAULT_CATALOG_PATH",
    "select_sources",
    "DEFAULT_SLOT_COUNT",
    "assemble_cards",
]
