from flask import Blueprint, render_template, current_app

main_bp = Blueprint('main', __name__)


@main_bp.route('/')
def index():
    """Home page: spotlight plus the top works of each category. Open to guests."""
    work_service = current_app.services.get('work')
    home = work_service.get_home_page()
    return render_template('main/index.html',
                           spotlight=home['spotlight'],
                           top_works=home['top_works'])
