"""
AuthService - username login, logout and user provisioning
"""

import logging
from typing import List, Optional, Tuple
from flask_login import login_user as flask_login_user, logout_user as flask_logout_user
from sqlalchemy.exc import SQLAlchemyError
from repositories.user_repository import UserRepository
from services.common.result import Result
from utils.datetime_utils import utc_now
from media_database import User

logger = logging.getLogger(__name__)

USERNAME_MAX_LENGTH = 50


class AuthService:
    """Service for session login and user lookup using Result pattern"""

    def __init__(self, user_repository: Optional[UserRepository] = None):
        """
        Args:
            user_repository: User repository for data access
        """
        if not user_repository:
            raise ValueError("UserRepository must be provided via dependency injection")
        self.user_repository = user_repository

    def authenticate_user(self, username: Optional[str]) -> Result[User]:
        """
        Resolve a username to an existing user.

        Users are provisioned out of band, so an unknown name is a failure
        rather than a signup.
        """
        username = (username or '').strip()
        if not username:
            return Result.failure("Could not log in", code="INVALID_CREDENTIALS")

        user = self.user_repository.find_by_username(username)
        if not user:
            return Result.failure("Could not log in", code="INVALID_CREDENTIALS")

        return Result.success(user)

    def login_user(self, user: User, remember: bool = False) -> Result[User]:
        """
        Bind the session to the user with Flask-Login and stamp last_login.
        """
        if not flask_login_user(user, remember=remember):
            return Result.failure("Could not log in", code="LOGIN_FAILED")

        login_time = utc_now()
        try:
            self.user_repository.update_last_login(user.id, login_time)
            self.user_repository.commit()
        except SQLAlchemyError as e:
            # The session is bound already; a stale timestamp is not fatal
            logger.warning(f"Could not record last login for user {user.id}: {e}")

        return Result.success(user, metadata={"last_login": login_time})

    def logout_user(self) -> Result[bool]:
        """Clear the session binding. Safe to call for guests."""
        flask_logout_user()
        return Result.success(True)

    def get_user_by_id(self, user_id: int) -> Result[User]:
        user = self.user_repository.get_by_id(user_id)
        if user:
            return Result.success(user)
        return Result.failure(f"User not found: {user_id}", code="NOT_FOUND")

    def get_users_with_vote_counts(self) -> List[Tuple[User, int]]:
        return self.user_repository.get_all_with_vote_counts()

    def create_user(self, username: Optional[str]) -> Result[User]:
        """
        Provision a user. Only the CLI and test fixtures call this.

        Returns:
            Result with the new user. Failure codes: VALIDATION_ERROR for a
            blank or overlong name, USER_EXISTS for a taken name.
        """
        username = (username or '').strip()
        if not username:
            return Result.failure("Username can't be blank", code="VALIDATION_ERROR")
        if len(username) > USERNAME_MAX_LENGTH:
            return Result.failure(
                f"Username must be at most {USERNAME_MAX_LENGTH} characters",
                code="VALIDATION_ERROR"
            )

        if self.user_repository.find_by_username(username):
            return Result.failure("User with this username already exists", code="USER_EXISTS")

        try:
            user = self.user_repository.create(username=username, created_at=utc_now())
            self.user_repository.commit()
        except SQLAlchemyError as e:
            self.user_repository.rollback()
            logger.error(f"Failed to create user: {e}")
            return Result.failure(f"Failed to create user: {e}", code="DATABASE_ERROR")

        logger.info(f"Created user: {username}")
        return Result.success(user)
