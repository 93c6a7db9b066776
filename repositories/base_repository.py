"""
Base Repository - Abstract base class for all repositories
Common database operations for the Media Ranker models
"""

from abc import ABC, abstractmethod
from typing import TypeVar, Generic, List, Optional, Type
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy import desc, asc
from enum import Enum
import logging

logger = logging.getLogger(__name__)

# Type variable for model classes
T = TypeVar('T')


class SortOrder(Enum):
    """Sort order options"""
    ASC = "asc"
    DESC = "desc"


class BaseRepository(ABC, Generic[T]):
    """
    Abstract base repository with common CRUD operations.

    Writes flush but never commit; the calling service owns the transaction
    and decides when to commit or roll back.
    """

    model_class: Type[T] = None

    def __init__(self, session: Session, model_class: Optional[Type[T]] = None):
        """
        Initialize repository with database session and model class.

        Args:
            session: SQLAlchemy database session
            model_class: The model class this repository manages. Subclasses
                set a default so callers only pass the session.
        """
        self.session = session
        if model_class is not None:
            self.model_class = model_class
        if self.model_class is None:
            raise ValueError(f"{type(self).__name__} requires a model class")

    # CREATE Operations

    def create(self, **kwargs) -> T:
        """
        Create a new entity and flush it to get an id.

        Raises:
            SQLAlchemyError: If database operation fails
        """
        try:
            entity = self.model_class(**kwargs)
            self.session.add(entity)
            self.session.flush()
            logger.debug(f"Created {self.model_class.__name__} with id {entity.id}")
            return entity
        except SQLAlchemyError as e:
            logger.error(f"Error creating {self.model_class.__name__}: {e}")
            self.session.rollback()
            raise

    # READ Operations

    def get_by_id(self, entity_id: int) -> Optional[T]:
        """
        Get entity by ID.

        Returns:
            Entity instance or None if not found. Ids too large for the
            database's integer column are never found.
        """
        try:
            return self.session.get(self.model_class, entity_id)
        except (SQLAlchemyError, OverflowError) as e:
            logger.error(f"Error getting {self.model_class.__name__} by id {entity_id}: {e}")
            return None

    def get_all(self, order_by: Optional[str] = None,
                order: SortOrder = SortOrder.ASC) -> List[T]:
        """
        Get all entities with optional ordering.

        Args:
            order_by: Field name to order by
            order: Sort order (ASC or DESC)
        """
        try:
            query = self.session.query(self.model_class)

            if order_by:
                order_field = getattr(self.model_class, order_by, None)
                if order_field is not None:
                    query = query.order_by(
                        desc(order_field) if order == SortOrder.DESC else asc(order_field)
                    )

            return query.all()
        except SQLAlchemyError as e:
            logger.error(f"Error getting all {self.model_class.__name__}: {e}")
            return []

    def find_by(self, **filters) -> List[T]:
        """Find entities by specific field values."""
        try:
            query = self.session.query(self.model_class)
            for field, value in filters.items():
                if hasattr(self.model_class, field):
                    query = query.filter(getattr(self.model_class, field) == value)
            return query.all()
        except SQLAlchemyError as e:
            logger.error(f"Error finding {self.model_class.__name__} by filters: {e}")
            return []

    def find_one_by(self, **filters) -> Optional[T]:
        """Find single entity by specific field values."""
        results = self.find_by(**filters)
        return results[0] if results else None

    def exists(self, **filters) -> bool:
        """Check if entity exists with given filters."""
        try:
            query = self.session.query(self.model_class)
            for field, value in filters.items():
                if hasattr(self.model_class, field):
                    query = query.filter(getattr(self.model_class, field) == value)
            return query.first() is not None
        except SQLAlchemyError as e:
            logger.error(f"Error checking existence of {self.model_class.__name__}: {e}")
            return False

    def count(self, **filters) -> int:
        """Count entities matching filters."""
        try:
            query = self.session.query(self.model_class)
            for field, value in filters.items():
                if hasattr(self.model_class, field):
                    query = query.filter(getattr(self.model_class, field) == value)
            return query.count()
        except SQLAlchemyError as e:
            logger.error(f"Error counting {self.model_class.__name__}: {e}")
            return 0

    # UPDATE Operations

    def update(self, entity: T, **updates) -> T:
        """
        Update an entity with new values.

        Raises:
            SQLAlchemyError: If database operation fails
        """
        try:
            for field, value in updates.items():
                if hasattr(entity, field):
                    setattr(entity, field, value)
            self.session.flush()
            logger.debug(f"Updated {self.model_class.__name__} with id {entity.id}")
            return entity
        except SQLAlchemyError as e:
            logger.error(f"Error updating {self.model_class.__name__}: {e}")
            self.session.rollback()
            raise

    # DELETE Operations

    def delete(self, entity: T) -> bool:
        """
        Delete an entity.

        Returns:
            True if successful, False otherwise
        """
        try:
            self.session.delete(entity)
            self.session.flush()
            logger.debug(f"Deleted {self.model_class.__name__} with id {entity.id}")
            return True
        except SQLAlchemyError as e:
            logger.error(f"Error deleting {self.model_class.__name__}: {e}")
            self.session.rollback()
            return False

    # Transaction Management

    def commit(self) -> None:
        """Commit the current transaction."""
        try:
            self.session.commit()
        except SQLAlchemyError as e:
            logger.error(f"Error committing transaction: {e}")
            self.session.rollback()
            raise

    def rollback(self) -> None:
        """Rollback the current transaction."""
        self.session.rollback()

    # Abstract Methods (to be implemented by subclasses)

    @abstractmethod
    def search(self, query: str, fields: Optional[List[str]] = None) -> List[T]:
        """
        Search entities by text query.

        Args:
            query: Search query string
            fields: Fields to search in (None for default fields)
        """
        pass
