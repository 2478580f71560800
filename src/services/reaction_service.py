from datetime import datetime, timezone
from typing import Optional

import structlog
from sqlalchemy.exc import SQLAlchemyError

from ..exceptions import DatabaseError, ValidationError
from ..models.reaction import Reaction
from ..repositories.reaction_repository import ReactionRepository
from ..utils.date_utils import utc_now
from ..utils.string_utils import truncate_text

logger = structlog.get_logger(__name__)


def timestamp_from_millis(ts: Optional[int]) -> datetime:
    if ts is None:
        return utc_now()
    try:
        return datetime.fromtimestamp(ts / 1000, tz=timezone.utc).replace(tzinfo=None)
    except (OverflowError, OSError, ValueError) as e:
        raise ValidationError(f"Invalid reaction timestamp: {ts}") from e


class ReactionService:

    def __init__(self, repository: ReactionRepository):
        self.repository = repository

    def save_reaction(self, user_id: str, article_id: str, emoji: str, ts: Optional[int] = None) -> Reaction:
        """Persist a reaction.

        Raises:
            ValidationError: ``ts`` is not a representable epoch-milliseconds value.
            DatabaseError: the reaction could not be stored.
        """
        reacted_at = timestamp_from_millis(ts)

        logger.info(
            "reaction_received",
            user_id=user_id,
            emoji=emoji,
            article_id=truncate_text(article_id, 53)
        )

        try:
            return self.repository.create(
                user_id=user_id,
                article_id=article_id,
                emoji=emoji,
                reacted_at=reacted_at
            )
        except SQLAlchemyError as e:
            self.repository.session.rollback()
            raise DatabaseError(f"Failed to save reaction: {e}") from e
