from flask import Blueprint, render_template, current_app
from auth_utils import login_required, load_user

user_bp = Blueprint('users', __name__)


@user_bp.route('/users')
@login_required("Must be logged in to view users.")
def index():
    users = current_app.services.get('auth').get_users_with_vote_counts()
    return render_template('users/index.html', users=users)


@user_bp.route('/users/<int:user_id>')
@load_user
@login_required("Must be logged in to view page.")
def show(user):
    votes = current_app.services.get('vote').get_votes_by_user(user.id)
    return render_template('users/show.html', user=user, votes=votes)
