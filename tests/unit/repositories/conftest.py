"""
Repository fixtures: a live session on the in-memory test database
"""
import pytest
from extensions import db
from media_database import User, Work


@pytest.fixture
def db_session(app):
    with app.app_context():
        yield db.session


@pytest.fixture
def people_and_works(db_session):
    """Two users, one album and one book, committed."""
    grace, ada = User(username='grace'), User(username='ada')
    album = Work(title='Kind of Blue', category='album')
    book = Work(title='Dune', category='book')
    db_session.add_all([grace, ada, album, book])
    db_session.commit()
    return grace, ada, album, book
