"""
WorkRepository - Data access layer for Work entities
Ranking queries order works by number of votes
"""

from typing import List, Optional, Dict
from sqlalchemy import func, asc, or_
from sqlalchemy.exc import SQLAlchemyError
from repositories.base_repository import BaseRepository
from media_database import Work, Vote, WorkCategory
import logging

logger = logging.getLogger(__name__)


class WorkRepository(BaseRepository[Work]):
    """Repository for Work data access"""

    model_class = Work

    def search(self, query: str, fields: Optional[List[str]] = None) -> List[Work]:
        """
        Search works by text query across title and creator.

        Args:
            query: Search query string
            fields: Specific fields to search (default: title, creator)
        """
        if not query:
            return []

        try:
            search_fields = fields or ['title', 'creator']
            conditions = [
                getattr(Work, field).ilike(f'%{query}%')
                for field in search_fields if hasattr(Work, field)
            ]
            if not conditions:
                return []
            return self.session.query(Work).filter(or_(*conditions)).all()
        except SQLAlchemyError as e:
            logger.error(f"Error searching works: {e}")
            return []

    def _ranked_query(self):
        vote_count = func.count(Vote.id)
        return (self.session.query(Work)
                .outerjoin(Vote, Vote.work_id == Work.id)
                .group_by(Work.id)), vote_count

    def find_by_category_ranked(self, category: str, limit: Optional[int] = None) -> List[Work]:
        """
        Works in a category, most votes first, ties by title.

        Args:
            category: Category value, e.g. 'album'
            limit: Optional cap on the number of works returned
        """
        try:
            query, vote_count = self._ranked_query()
            query = (query.filter(Work.category == category)
                     .order_by(vote_count.desc(), asc(Work.title), asc(Work.id)))
            if limit:
                query = query.limit(limit)
            return query.all()
        except SQLAlchemyError as e:
            logger.error(f"Error ranking works in {category}: {e}")
            return []

    def get_ranked_by_category(self, limit: Optional[int] = None) -> Dict[str, List[Work]]:
        """Ranked works for every category, including empty ones."""
        return {
            category: self.find_by_category_ranked(category, limit=limit)
            for category in WorkCategory.values()
        }

    def get_spotlight(self) -> Optional[Work]:
        """
        The single most voted work; ties go to the lowest id.

        Returns:
            Work or None when the catalog is empty
        """
        try:
            query, vote_count = self._ranked_query()
            return query.order_by(vote_count.desc(), asc(Work.id)).first()
        except SQLAlchemyError as e:
            logger.error(f"Error getting spotlight work: {e}")
            return None
