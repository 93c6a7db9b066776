"""
Work routes: catalog CRUD and upvoting
"""
from flask import Blueprint, render_template, request, redirect, url_for, flash, current_app
from flask_login import current_user
from auth_utils import login_required, load_work, FAILURE, SUCCESS

work_bp = Blueprint('works', __name__)

WORK_FIELDS = ('title', 'category', 'creator', 'publication_year', 'description')


def work_params():
    """
    Submitted work attributes. Accepts ``work[title]`` style keys as well as
    plain ``title``; absent fields come back as None.
    """
    form = request.form
    return {
        field: form.get(f'work[{field}]', form.get(field))
        for field in WORK_FIELDS
    }


def _work_page(work, **_):
    return url_for('works.show', work_id=work.id)


@work_bp.route('/works')
@login_required("Must be logged in to view works.")
def index():
    """All works grouped by category, ranked by votes"""
    works_by_category = current_app.services.get('work').get_works_by_category()
    return render_template('works/index.html', works_by_category=works_by_category)


@work_bp.route('/works/new')
@login_required("Must be logged in to create a work.")
def new():
    return render_template('works/new.html', work=work_params(), errors={})


@work_bp.route('/works', methods=['POST'])
@login_required("Must be logged in to create a work.")
def create():
    params = work_params()
    result = current_app.services.get('work').create_work(params)

    if result.is_failure:
        if result.error_code != 'VALIDATION_ERROR':
            flash('Could not create work', FAILURE)
        return render_template('works/new.html', work=params, errors=result.errors), 400

    work = result.data
    flash(f'Successfully created {work.category} {work.id}', SUCCESS)
    return redirect(url_for('works.show', work_id=work.id))


@work_bp.route('/works/<int:work_id>')
@load_work
@login_required("Must be logged in to view page.")
def show(work):
    votes = current_app.services.get('vote').get_votes_for_work(work.id)
    return render_template('works/show.html', work=work, votes=votes)


@work_bp.route('/works/<int:work_id>/edit')
@load_work
@login_required("Must be logged in to edit work.")
def edit(work):
    return render_template('works/edit.html', work=work, form=_form_values(work), errors={})


@work_bp.route('/works/<int:work_id>', methods=['PATCH', 'PUT'])
@load_work
@login_required("Must be logged in to update work.")
def update(work):
    params = work_params()
    result = current_app.services.get('work').update_work(work.id, params)

    if result.is_failure:
        if result.error_code != 'VALIDATION_ERROR':
            flash('Could not update work', FAILURE)
        return render_template('works/edit.html', work=work, form=params, errors=result.errors), 400

    flash(f'Successfully updated {work.category} {work.id}', SUCCESS)
    return redirect(url_for('works.show', work_id=work.id))


@work_bp.route('/works/<int:work_id>', methods=['DELETE'])
@load_work
@login_required("Must be logged in to delete a work.")
def destroy(work):
    title, category = work.title, work.category
    result = current_app.services.get('work').delete_work(work.id)

    if result.is_failure:
        flash('Could not delete work', FAILURE)
        return redirect(url_for('works.show', work_id=work.id))

    flash(f'Successfully destroyed {category} "{title}"', SUCCESS)
    return redirect(url_for('main.index'))


@work_bp.route('/works/<int:work_id>/upvote', methods=['POST'])
@load_work
@login_required("You must log in to do that", redirect_to=_work_page)
def upvote(work):
    result = current_app.services.get('vote').upvote(current_user.id, work.id)

    if result.is_success:
        flash('Successfully upvoted!', SUCCESS)
    else:
        flash(result.error, FAILURE)
    return redirect(url_for('works.show', work_id=work.id))


def _form_values(work):
    return {field: getattr(work, field) for field in WORK_FIELDS}
