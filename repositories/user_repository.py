"""
UserRepository - Data access layer for User entities
"""

from typing import List, Optional
from datetime import datetime
from sqlalchemy import func, asc
from sqlalchemy.exc import SQLAlchemyError
from repositories.base_repository import BaseRepository
from media_database import User, Vote
import logging

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository[User]):
    """Repository for User data access"""

    model_class = User

    def search(self, query: str, fields: Optional[List[str]] = None) -> List[User]:
        """
        Search users by username.

        Args:
            query: Search query string
            fields: Ignored beyond 'username', the only searchable field
        """
        if not query:
            return []

        try:
            return (self.session.query(User)
                    .filter(User.username.ilike(f'%{query}%'))
                    .order_by(asc(User.username))
                    .all())
        except SQLAlchemyError as e:
            logger.error(f"Error searching users: {e}")
            return []

    def find_by_username(self, username: str) -> Optional[User]:
        """
        Find user by exact username.

        Returns:
            User or None
        """
        try:
            return self.session.query(User).filter_by(username=username).first()
        except SQLAlchemyError as e:
            logger.error(f"Error finding user by username: {e}")
            return None

    def get_all_with_vote_counts(self) -> List[tuple]:
        """
        List every user with the number of votes they have cast.

        Returns:
            List of (User, vote_count) tuples, most active voters first
        """
        try:
            vote_count = func.count(Vote.id)
            return (self.session.query(User, vote_count)
                    .outerjoin(Vote, Vote.user_id == User.id)
                    .group_by(User.id)
                    .order_by(vote_count.desc(), asc(User.username))
                    .all())
        except SQLAlchemyError as e:
            logger.error(f"Error listing users with vote counts: {e}")
            return []

    def update_last_login(self, user_id: int, login_time: datetime) -> Optional[User]:
        """
        Update user's last login timestamp.

        Returns:
            Updated user or None if not found
        """
        try:
            user = self.session.get(User, user_id)
            if user:
                user.last_login = login_time
                self.session.flush()
                return user
            return None
        except SQLAlchemyError as e:
            logger.error(f"Error updating last login: {e}")
            self.session.rollback()
            return None
