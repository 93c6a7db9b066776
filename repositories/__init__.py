"""
Repository Layer - Data Access Abstraction
"""

from .base_repository import BaseRepository, SortOrder
from .user_repository import UserRepository
from .work_repository import WorkRepository
from .vote_repository import VoteRepository

__all__ = [
    'BaseRepository',
    'SortOrder',
    'UserRepository',
    'WorkRepository',
    'VoteRepository'
]
