# tests/conftest.py
"""
Shared fixtures for the pytest test suite.

Each test gets a fresh application backed by an in-memory SQLite database
seeded with two users and one work per category plus a second album. The
app fixture yields outside of any app context so every request made through
the test client gets its own context, like a real request would.
"""
import os
import pytest
from extensions import db
from media_database import User, Work, Vote


@pytest.fixture
def app():
    """A new Flask application with seeded data for each test function."""
    os.environ['FLASK_ENV'] = 'testing'
    from app import create_app

    app = create_app(config_name='testing')

    with app.app_context():
        db.create_all()

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def seed(app):
    """
    Seed users and works, returning their ids by fixture name:

        {'users': {'grace': 1, 'ada': 2},
         'works': {'album': 1, 'book': 2, 'movie': 3, 'second_album': 4}}
    """
    with app.app_context():
        grace = User(username='grace')
        ada = User(username='ada')
        album = Work(title='Kind of Blue', category='album', creator='Miles Davis', publication_year=1959)
        book = Work(title='Parable of the Sower', category='book', creator='Octavia E. Butler')
        movie = Work(title='Spirited Away', category='movie', creator='Hayao Miyazaki')
        second_album = Work(title='Blue Train', category='album', creator='John Coltrane')

        db.session.add_all([grace, ada, album, book, movie, second_album])
        db.session.commit()

        return {
            'users': {'grace': grace.id, 'ada': ada.id},
            'works': {
                'album': album.id,
                'book': book.id,
                'movie': movie.id,
                'second_album': second_album.id,
            },
        }


@pytest.fixture
def client(app, seed):
    """A test client for a seeded application."""
    return app.test_client()


@pytest.fixture
def login(client):
    """
    Log the client in by username, then clear the login flash so assertions
    only see messages from the request under test.
    """
    def _login(username='grace'):
        response = client.post('/login', data={'username': username})
        with client.session_transaction() as sess:
            sess.pop('_flashes', None)
        return response
    return _login


@pytest.fixture
def flashes(client):
    """Read pending flash messages as (status, result_text) pairs without consuming them."""
    def _flashes():
        with client.session_transaction() as sess:
            return list(sess.get('_flashes', []))
    return _flashes


@pytest.fixture
def last_flash(flashes):
    def _last_flash():
        messages = flashes()
        assert messages, "Expected a flash message"
        return messages[-1]
    return _last_flash


@pytest.fixture
def count(app):
    """Count rows of a model in a short-lived app context."""
    def _count(model=Work):
        with app.app_context():
            return db.session.query(model).count()
    return _count


@pytest.fixture
def fetch(app):
    """Load a row by id and return its column values as a dict, or None."""
    def _fetch(model, entity_id):
        with app.app_context():
            entity = db.session.get(model, entity_id)
            if entity is None:
                return None
            return {column.name: getattr(entity, column.name) for column in model.__table__.columns}
    return _fetch


@pytest.fixture
def add_vote(app):
    """Insert a vote directly, bypassing the routes."""
    def _add_vote(user_id, work_id):
        with app.app_context():
            vote = Vote(user_id=user_id, work_id=work_id)
            db.session.add(vote)
            db.session.commit()
            return vote.id
    return _add_vote
