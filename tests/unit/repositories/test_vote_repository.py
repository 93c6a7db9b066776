"""
Tests for VoteRepository and the one-vote-per-pair constraint
"""

import pytest
from datetime import timedelta
from sqlalchemy.exc import IntegrityError
from repositories.vote_repository import VoteRepository
from media_database import Vote
from utils.datetime_utils import utc_now


class TestVoteRepository:

    @pytest.fixture
    def repo(self, db_session):
        return VoteRepository(db_session)

    def test_has_voted(self, repo, people_and_works):
        grace, ada, album, _ = people_and_works
        repo.create(user_id=grace.id, work_id=album.id)
        repo.commit()

        assert repo.has_voted(grace.id, album.id)
        assert not repo.has_voted(ada.id, album.id)

    def test_duplicate_pair_violates_the_unique_constraint(self, repo, people_and_works):
        grace, _, album, _ = people_and_works
        repo.create(user_id=grace.id, work_id=album.id)
        repo.commit()

        with pytest.raises(IntegrityError):
            repo.create(user_id=grace.id, work_id=album.id)
        assert repo.count(work_id=album.id) == 1

    def test_find_by_user_newest_first(self, repo, db_session, people_and_works):
        grace, _, album, book = people_and_works
        now = utc_now()
        db_session.add(Vote(user_id=grace.id, work_id=album.id, created_at=now - timedelta(days=1)))
        db_session.add(Vote(user_id=grace.id, work_id=book.id, created_at=now))
        db_session.commit()

        assert [v.work_id for v in repo.find_by_user(grace.id)] == [book.id, album.id]

    def test_find_by_work_oldest_first(self, repo, db_session, people_and_works):
        grace, ada, album, _ = people_and_works
        now = utc_now()
        db_session.add(Vote(user_id=grace.id, work_id=album.id, created_at=now))
        db_session.add(Vote(user_id=ada.id, work_id=album.id, created_at=now - timedelta(hours=1)))
        db_session.commit()

        assert [v.user_id for v in repo.find_by_work(album.id)] == [ada.id, grace.id]

    def test_search_by_work_title(self, repo, people_and_works):
        grace, _, album, book = people_and_works
        repo.create(user_id=grace.id, work_id=album.id)
        repo.create(user_id=grace.id, work_id=book.id)
        repo.commit()

        assert [v.work_id for v in repo.search('kind')] == [album.id]
