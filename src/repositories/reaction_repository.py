from datetime import datetime

from sqlalchemy.orm import Session

from ..models.reaction import Reaction


class ReactionRepository:

    def __init__(self, session: Session):
        self.session = session

    def create(self, user_id: str, article_id: str, emoji: str, reacted_at: datetime) -> Reaction:
        reaction = Reaction(
            user_id=user_id,
            article_id=article_id,
            emoji=emoji,
            reacted_at=reacted_at
        )
        self.session.add(reaction)
        self.session.commit()
        self.session.refresh(reaction)
        return reaction
