# routes/auth.py

from flask import Blueprint, render_template, redirect, url_for, flash, request, current_app
from flask_login import current_user
from auth_utils import FAILURE, SUCCESS
from logging_config import security_logger

auth_bp = Blueprint('auth', __name__)


@auth_bp.route('/login', methods=['GET'])
def login_form():
    """Login page"""
    return render_template('auth/login.html')


@auth_bp.route('/login', methods=['POST'])
def login():
    """Bind the session to an existing user by username"""
    username = request.form.get('username', '').strip()

    auth_service = current_app.services.get('auth')
    auth_result = auth_service.authenticate_user(username)

    if auth_result.is_success:
        login_result = auth_service.login_user(auth_result.data)
        if login_result.is_success:
            security_logger.log_login_attempt(username, True, request.remote_addr)
            flash(f'Successfully logged in as existing user {auth_result.data.username}', SUCCESS)
            return redirect(url_for('main.index'))
        flash(login_result.error, FAILURE)
    else:
        flash(auth_result.error, FAILURE)

    security_logger.log_login_attempt(username, False, request.remote_addr)
    return render_template('auth/login.html', username=username), 400


@auth_bp.route('/logout', methods=['DELETE', 'POST'])
def logout():
    """Clear the session binding. Guests are simply sent home."""
    user_id = current_user.id if current_user.is_authenticated else None
    current_app.services.get('auth').logout_user()
    security_logger.log_logout(user_id)
    flash('Successfully logged out', SUCCESS)
    return redirect(url_for('main.index'))
