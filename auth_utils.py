# auth_utils.py
"""
Authorization gate for routes.

Member routes stack ``load_work`` outside ``login_required`` so a missing id
is a 404 for everyone, and only an existing resource reveals the login wall.
"""

from functools import wraps
from typing import Callable, Optional, Union
from flask import abort, current_app, flash, redirect, request, url_for
from flask_login import current_user
from logging_config import security_logger

FAILURE = 'failure'
SUCCESS = 'success'


def login_required(message: str, redirect_to: Optional[Union[str, Callable]] = None):
    """
    Require a logged-in user, otherwise flash ``message`` as a failure and
    redirect.

    Args:
        message: Result text shown to the guest
        redirect_to: Endpoint name, or a callable receiving the view's kwargs
            and returning a URL. Defaults to the root page.
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            if current_user.is_authenticated:
                return f(*args, **kwargs)

            security_logger.log_access_denied(request.endpoint, reason="not logged in")
            flash(message, FAILURE)
            if callable(redirect_to):
                target = redirect_to(**kwargs)
            else:
                target = url_for(redirect_to or 'main.index')
            return redirect(target)
        return decorated_function
    return decorator


def load_work(f):
    """Resolve the ``work_id`` URL parameter to a Work, aborting with 404."""
    @wraps(f)
    def decorated_function(*args, work_id, **kwargs):
        result = current_app.services.get('work').get_work(work_id)
        if result.is_failure:
            abort(404)
        return f(*args, work=result.data, **kwargs)
    return decorated_function


def load_user(f):
    """Resolve the ``user_id`` URL parameter to a User, aborting with 404."""
    @wraps(f)
    def decorated_function(*args, user_id, **kwargs):
        result = current_app.services.get('auth').get_user_by_id(user_id)
        if result.is_failure:
            abort(404)
        return f(*args, user=result.data, **kwargs)
    return decorated_function
