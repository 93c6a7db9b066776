# extensions.py

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager
from flask_migrate import Migrate

# Single source of truth for the db object.
# Initialized here, bound to an app in create_app().
db = SQLAlchemy()

# Authentication extensions
login_manager = LoginManager()
migrate = Migrate()
