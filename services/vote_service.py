"""
VoteService - one upvote per user per work
"""

import logging
from typing import List, Optional
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from repositories.vote_repository import VoteRepository
from repositories.work_repository import WorkRepository
from repositories.user_repository import UserRepository
from services.common.result import Result
from media_database import Vote

logger = logging.getLogger(__name__)

COULD_NOT_UPVOTE = "Could not upvote"


class VoteService:
    """Records upvotes; a repeated upvote of the same pair is refused"""

    def __init__(self, vote_repository: Optional[VoteRepository] = None,
                 work_repository: Optional[WorkRepository] = None,
                 user_repository: Optional[UserRepository] = None):
        if not vote_repository or not work_repository or not user_repository:
            raise ValueError("Vote, Work and User repositories must be provided via dependency injection")
        self.vote_repository = vote_repository
        self.work_repository = work_repository
        self.user_repository = user_repository

    def upvote(self, user_id: int, work_id: int) -> Result[Vote]:
        """
        Upvote a work on behalf of a user.

        Returns:
            Result with the new Vote. Failure codes: NOT_FOUND for an unknown
            work or user, DUPLICATE_VOTE when the pair already has a vote.
        """
        if self.work_repository.get_by_id(work_id) is None:
            return Result.failure(f"Work not found: {work_id}", code="NOT_FOUND")
        if self.user_repository.get_by_id(user_id) is None:
            return Result.failure(f"User not found: {user_id}", code="NOT_FOUND")

        if self.vote_repository.has_voted(user_id, work_id):
            logger.info(f"User {user_id} already voted for work {work_id}")
            return Result.failure(COULD_NOT_UPVOTE, code="DUPLICATE_VOTE")

        try:
            vote = self.vote_repository.create(user_id=user_id, work_id=work_id)
            self.vote_repository.commit()
        except IntegrityError:
            # Lost a race with a concurrent vote for the same pair
            self.vote_repository.rollback()
            return Result.failure(COULD_NOT_UPVOTE, code="DUPLICATE_VOTE")
        except SQLAlchemyError as e:
            self.vote_repository.rollback()
            logger.error(f"Failed to record vote: {e}")
            return Result.failure(COULD_NOT_UPVOTE, code="DATABASE_ERROR")

        logger.info(f"User {user_id} upvoted work {work_id}")
        return Result.success(vote)

    def get_votes_by_user(self, user_id: int) -> List[Vote]:
        return self.vote_repository.find_by_user(user_id)

    def get_votes_for_work(self, work_id: int) -> List[Vote]:
        return self.vote_repository.find_by_work(work_id)
