"""
VoteRepository - Data access layer for Vote entities
"""

from typing import List, Optional
from sqlalchemy import desc
from sqlalchemy.exc import SQLAlchemyError
from repositories.base_repository import BaseRepository
from media_database import Vote, Work
import logging

logger = logging.getLogger(__name__)


class VoteRepository(BaseRepository[Vote]):
    """Repository for Vote data access"""

    model_class = Vote

    def search(self, query: str, fields: Optional[List[str]] = None) -> List[Vote]:
        """Find votes whose work title matches the query."""
        if not query:
            return []

        try:
            return (self.session.query(Vote)
                    .join(Work, Vote.work_id == Work.id)
                    .filter(Work.title.ilike(f'%{query}%'))
                    .all())
        except SQLAlchemyError as e:
            logger.error(f"Error searching votes: {e}")
            return []

    def find_by_user_and_work(self, user_id: int, work_id: int) -> Optional[Vote]:
        try:
            return (self.session.query(Vote)
                    .filter_by(user_id=user_id, work_id=work_id)
                    .first())
        except SQLAlchemyError as e:
            logger.error(f"Error finding vote for user {user_id} on work {work_id}: {e}")
            return None

    def has_voted(self, user_id: int, work_id: int) -> bool:
        return self.find_by_user_and_work(user_id, work_id) is not None

    def find_by_user(self, user_id: int) -> List[Vote]:
        """Votes cast by a user, newest first."""
        try:
            return (self.session.query(Vote)
                    .filter_by(user_id=user_id)
                    .order_by(desc(Vote.created_at), desc(Vote.id))
                    .all())
        except SQLAlchemyError as e:
            logger.error(f"Error finding votes for user {user_id}: {e}")
            return []

    def find_by_work(self, work_id: int) -> List[Vote]:
        """Votes on a work, oldest first."""
        try:
            return (self.session.query(Vote)
                    .filter_by(work_id=work_id)
                    .order_by(Vote.created_at, Vote.id)
                    .all())
        except SQLAlchemyError as e:
            logger.error(f"Error finding votes for work {work_id}: {e}")
            return []
