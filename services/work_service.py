"""
WorkService - catalog management for albums, books and movies
"""

import logging
from typing import Any, Dict, List, Mapping, Optional
from sqlalchemy.exc import SQLAlchemyError
from repositories.work_repository import WorkRepository
from services.common.result import Result
from services.work_validation import validate_work
from media_database import Work

logger = logging.getLogger(__name__)


class WorkService:
    """Service for creating, ranking and editing works using Result pattern"""

    def __init__(self, work_repository: Optional[WorkRepository] = None,
                 top_works_limit: int = 10):
        """
        Args:
            work_repository: WorkRepository for data access
            top_works_limit: How many works the home page shows per category
        """
        if not work_repository:
            raise ValueError("WorkRepository must be provided via dependency injection")
        self.work_repository = work_repository
        self.top_works_limit = top_works_limit

    def get_work(self, work_id: int) -> Result[Work]:
        work = self.work_repository.get_by_id(work_id)
        if work is None:
            return Result.failure(f"Work not found: {work_id}", code="NOT_FOUND")
        return Result.success(work)

    def get_works_by_category(self) -> Dict[str, List[Work]]:
        """Every work grouped by category, ranked by votes."""
        return self.work_repository.get_ranked_by_category()

    def get_home_page(self) -> Dict[str, Any]:
        """
        Data for the root page.

        Returns:
            Dict with 'spotlight' (Work or None) and 'top_works' mapping each
            category to at most ``top_works_limit`` ranked works
        """
        return {
            'spotlight': self.work_repository.get_spotlight(),
            'top_works': self.work_repository.get_ranked_by_category(limit=self.top_works_limit),
        }

    def create_work(self, data: Mapping[str, Any]) -> Result[Work]:
        """
        Validate and persist a new work.

        Returns:
            Result with the created Work, or the validation failure
        """
        validation = validate_work(data)
        if validation.is_failure:
            logger.info(f"Rejected work: {validation.errors}")
            return validation

        try:
            work = self.work_repository.create(**validation.data)
            self.work_repository.commit()
        except SQLAlchemyError as e:
            self.work_repository.rollback()
            logger.error(f"Failed to create work: {e}")
            return Result.failure(f"Failed to create work: {e}", code="DATABASE_ERROR")

        logger.info(f"Created work {work.id}: {work.title} ({work.category})")
        return Result.success(work)

    def update_work(self, work_id: int, data: Mapping[str, Any]) -> Result[Work]:
        """
        Validate and apply new attributes to an existing work.

        Nothing is written when validation fails.
        """
        found = self.get_work(work_id)
        if found.is_failure:
            return found
        work = found.data

        validation = validate_work(data)
        if validation.is_failure:
            self.work_repository.rollback()
            logger.info(f"Rejected update to work {work_id}: {validation.errors}")
            return Result.failure(validation.error, code=validation.error_code,
                                  metadata={'errors': validation.errors, 'work': work})

        try:
            self.work_repository.update(work, **validation.data)
            self.work_repository.commit()
        except SQLAlchemyError as e:
            self.work_repository.rollback()
            logger.error(f"Failed to update work {work_id}: {e}")
            return Result.failure(f"Failed to update work: {e}", code="DATABASE_ERROR")

        logger.info(f"Updated work {work.id}")
        return Result.success(work)

    def delete_work(self, work_id: int) -> Result[Work]:
        """Delete a work together with its votes."""
        found = self.get_work(work_id)
        if found.is_failure:
            return found
        work = found.data

        if not self.work_repository.delete(work):
            return Result.failure(f"Failed to delete work: {work_id}", code="DATABASE_ERROR")
        try:
            self.work_repository.commit()
        except SQLAlchemyError as e:
            return Result.failure(f"Failed to delete work: {e}", code="DATABASE_ERROR")

        logger.info(f"Deleted work {work_id}")
        return Result.success(work)
