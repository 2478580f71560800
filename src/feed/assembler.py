"""Card assembly: one card per selected source"""

from typing import List, Optional, Sequence

import structlog

from .models import Article, Card, Source

logger = structlog.get_logger(__name__)


def find_article_for_source(source: Source, articles: Sequence[Article]) -> Optional[Article]:
    for article in articles:
        if article.source_id == source.id:
            return article
    return None


def assemble_cards(sources: Sequence[Source], articles: Sequence[Article]) -> List[Card]:
    """
    Fill each source's slot with its own article, or with a fallback article.

    The fallback for a slot is ``articles[len(cards) % len(articles)]`` where
    ``cards`` is what has been emitted so far, so the choice depends on the
    emission count rather than the slot position. Existing clients rely on
    this ordering; keep it unless the product owner signs off on a change.

    Cards always carry the slot source's id, name and side, including
    fallback cards. No articles means no cards.
    """
    cards: List[Card] = []

    for source in sources:
        article = find_article_for_source(source, articles)

        if article is not None:
            logger.debug("feed_slot_matched", source_id=source.id, title=article.title)
        elif articles:
            article = articles[len(cards) % len(articles)]
            logger.debug(
                "feed_slot_fallback",
                source_id=source.id,
                fallback_source_id=article.source_id,
                title=article.title,
            )
        else:
            logger.debug("feed_slot_empty", source_id=source.id)
            continue

        cards.append(Card.for_source(source, article))

    return cards
