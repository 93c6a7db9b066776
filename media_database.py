# media_database.py

from extensions import db
from utils.datetime_utils import utc_now
from enum import Enum
from typing import Optional


class WorkCategory(str, Enum):
    """Categories a work can belong to"""
    ALBUM = 'album'
    BOOK = 'book'
    MOVIE = 'movie'

    @classmethod
    def values(cls):
        return [category.value for category in cls]

    @classmethod
    def from_value(cls, value) -> Optional['WorkCategory']:
        """Exact, case-sensitive lookup. Returns None for anything else."""
        for category in cls:
            if category.value == value:
                return category
        return None


# --- User Model ---
class User(db.Model):
    __tablename__ = 'user'

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(50), unique=True, nullable=False)
    created_at = db.Column(db.DateTime, default=utc_now)
    last_login = db.Column(db.DateTime)

    votes = db.relationship('Vote', back_populates='user', lazy=True,
                            cascade="all, delete-orphan")

    # Flask-Login required properties
    @property
    def is_authenticated(self):
        return True

    @property
    def is_active(self):
        return True

    @property
    def is_anonymous(self):
        return False

    def get_id(self):
        return str(self.id)

    @property
    def vote_count(self):
        return len(self.votes)

    def __repr__(self):
        return f'<User {self.id}: {self.username}>'


# --- Work Model ---
class Work(db.Model):
    """A catalog item: an album, book or movie"""
    __tablename__ = 'work'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False)
    category = db.Column(db.String(20), nullable=False, index=True)
    creator = db.Column(db.String(200))
    publication_year = db.Column(db.Integer)
    description = db.Column(db.Text)

    # Timestamps
    created_at = db.Column(db.DateTime, default=utc_now, nullable=False)
    updated_at = db.Column(db.DateTime, default=utc_now, onupdate=utc_now)

    votes = db.relationship('Vote', back_populates='work', lazy=True,
                            cascade="all, delete-orphan")

    @property
    def vote_count(self):
        return len(self.votes)

    @property
    def voters(self):
        return [vote.user for vote in self.votes]

    def __repr__(self):
        return f'<Work {self.id}: {self.title} ({self.category})>'


# --- Vote Model ---
class Vote(db.Model):
    """One upvote of one work by one user"""
    __tablename__ = 'vote'
    __table_args__ = (
        db.UniqueConstraint('user_id', 'work_id', name='unique_user_work_vote'),
    )

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('user.id'), nullable=False, index=True)
    work_id = db.Column(db.Integer, db.ForeignKey('work.id'), nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=utc_now, nullable=False)

    user = db.relationship('User', back_populates='votes')
    work = db.relationship('Work', back_populates='votes')

    def __repr__(self):
        return f'<Vote user={self.user_id} work={self.work_id}>'
