# app.py

from flask import Flask, g, request, jsonify
from flask_login import current_user
from config import get_config
from extensions import db, login_manager, migrate
import os
import uuid
from werkzeug.middleware.proxy_fix import ProxyFix
from logging_config import setup_logging, get_logger
from utils.method_override import MethodOverrideMiddleware

# Configure logging as early as possible
setup_logging(app_name="media-ranker", log_level=os.environ.get('LOG_LEVEL', 'INFO'))
logger = get_logger(__name__)


def init_sentry():
    """Initialize Sentry error tracking in production."""
    sentry_dsn = os.environ.get('SENTRY_DSN')
    if sentry_dsn and os.environ.get('FLASK_ENV') == 'production':
        import sentry_sdk
        from sentry_sdk.integrations.flask import FlaskIntegration
        from sentry_sdk.integrations.sqlalchemy import SqlalchemyIntegration

        sentry_sdk.init(
            dsn=sentry_dsn,
            integrations=[
                FlaskIntegration(transaction_style='endpoint'),
                SqlalchemyIntegration(),
            ],
            traces_sample_rate=0.1,
            environment=os.environ.get('FLASK_ENV', 'development'),
            release=os.environ.get('GIT_SHA', 'unknown')
        )
        logger.info("Sentry error tracking initialized")


init_sentry()


def create_app(config_name=None, test_config=None):
    """Create and configure an instance of the Flask application."""
    app = Flask(__name__)

    config_class = get_config(config_name)
    app.config.from_object(config_class)

    if test_config:
        app.config.update(test_config)

    config_class.init_app(app)

    app.wsgi_app = MethodOverrideMiddleware(app.wsgi_app)
    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1, x_prefix=1)

    db.init_app(app)
    migrate.init_app(app, db)

    app.services = _create_service_registry(app)

    # Session-bound authentication
    login_manager.init_app(app)
    login_manager.login_view = 'auth.login_form'

    from media_database import User

    @login_manager.user_loader
    def load_user(user_id):
        try:
            return db.session.get(User, int(user_id))
        except (TypeError, ValueError):
            return None

    @app.before_request
    def before_request():
        g.request_id = str(uuid.uuid4())
        g.user_id = current_user.get_id() if current_user.is_authenticated else None
        logger.info("Request started",
                    request_id=g.request_id,
                    method=request.method,
                    path=request.path)

    @app.after_request
    def after_request(response):
        logger.info("Request completed",
                    request_id=getattr(g, 'request_id', None),
                    status_code=response.status_code)
        return response

    # Global error handlers
    @app.errorhandler(500)
    def internal_error(error):
        logger.error("Internal server error",
                     request_id=getattr(g, 'request_id', None),
                     error=str(error))
        return "Internal server error", 500

    @app.errorhandler(404)
    def not_found_error(error):
        logger.warning("Page not found",
                       request_id=getattr(g, 'request_id', None),
                       path=request.path)
        return "Page not found", 404

    @app.route('/health')
    def health_check():
        """Health check endpoint for monitoring - no auth required"""
        from sqlalchemy import text
        from sqlalchemy.exc import SQLAlchemyError
        health_status = {
            'status': 'healthy',
            'service': 'media-ranker'
        }

        try:
            db.session.execute(text('SELECT 1'))
            health_status['database'] = 'connected'
        except SQLAlchemyError as e:
            health_status['database'] = 'error'
            health_status['status'] = 'degraded'
            logger.error(f"Health check database error: {e}")

        return jsonify(health_status), 200 if health_status['status'] == 'healthy' else 503

    from utils.datetime_utils import format_timestamp
    app.add_template_filter(format_timestamp, 'timestamp')

    # Register blueprints for routes
    from routes.main_routes import main_bp
    from routes.auth import auth_bp
    from routes.work_routes import work_bp
    from routes.user_routes import user_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(work_bp)
    app.register_blueprint(user_bp)

    # Register CLI commands
    from scripts import commands
    commands.init_app(app)

    return app


def _create_service_registry(app):
    """Wire repositories and services for lazy creation on first use"""
    from services.registry import ServiceRegistry

    registry = ServiceRegistry()

    registry.register_factory('db_session', lambda: db.session)

    registry.register_factory(
        'user_repository',
        lambda db_session: _create_user_repository(db_session),
        dependencies=['db_session']
    )
    registry.register_factory(
        'work_repository',
        lambda db_session: _create_work_repository(db_session),
        dependencies=['db_session']
    )
    registry.register_factory(
        'vote_repository',
        lambda db_session: _create_vote_repository(db_session),
        dependencies=['db_session']
    )

    registry.register_factory(
        'auth',
        lambda user_repository: _create_auth_service(user_repository),
        dependencies=['user_repository']
    )
    registry.register_factory(
        'work',
        lambda work_repository: _create_work_service(work_repository, app.config['TOP_WORKS_LIMIT']),
        dependencies=['work_repository']
    )
    registry.register_factory(
        'vote',
        lambda vote_repository, work_repository, user_repository: _create_vote_service(
            vote_repository, work_repository, user_repository
        ),
        dependencies=['vote_repository', 'work_repository', 'user_repository']
    )

    errors = registry.validate_dependencies()
    if errors:
        for error in errors:
            logger.error(f"Service dependency error: {error}")
        raise RuntimeError(f"Service dependency errors: {errors}")

    return registry


# Service Factory Functions
# These are only called when the service is first requested

def _create_user_repository(db_session):
    from repositories.user_repository import UserRepository
    return UserRepository(db_session)


def _create_work_repository(db_session):
    from repositories.work_repository import WorkRepository
    return WorkRepository(db_session)


def _create_vote_repository(db_session):
    from repositories.vote_repository import VoteRepository
    return VoteRepository(db_session)


def _create_auth_service(user_repository):
    """Create AuthService with its repository"""
    from services.auth_service import AuthService
    logger.info("Initializing AuthService")
    return AuthService(user_repository=user_repository)


def _create_work_service(work_repository, top_works_limit):
    """Create WorkService with its repository"""
    from services.work_service import WorkService
    logger.info("Initializing WorkService")
    return WorkService(work_repository=work_repository, top_works_limit=top_works_limit)


def _create_vote_service(vote_repository, work_repository, user_repository):
    """Create VoteService with its repositories"""
    from services.vote_service import VoteService
    logger.info("Initializing VoteService")
    return VoteService(
        vote_repository=vote_repository,
        work_repository=work_repository,
        user_repository=user_repository
    )
