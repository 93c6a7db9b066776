# commands.py

import click
from flask import current_app
from flask.cli import with_appcontext
from extensions import db

DEMO_CATALOG = [
    {'title': 'Kind of Blue', 'category': 'album', 'creator': 'Miles Davis', 'publication_year': 1959},
    {'title': 'Blue Train', 'category': 'album', 'creator': 'John Coltrane', 'publication_year': 1958},
    {'title': 'Parable of the Sower', 'category': 'book', 'creator': 'Octavia E. Butler', 'publication_year': 1993},
    {'title': 'The Left Hand of Darkness', 'category': 'book', 'creator': 'Ursula K. Le Guin', 'publication_year': 1969},
    {'title': 'Spirited Away', 'category': 'movie', 'creator': 'Hayao Miyazaki', 'publication_year': 2001},
    {'title': 'Paris, Texas', 'category': 'movie', 'creator': 'Wim Wenders', 'publication_year': 1984},
]


@click.command('create-user')
@click.argument('username')
@with_appcontext
def create_user(username):
    """Provision a user who can log in with USERNAME"""
    result = current_app.services.get('auth').create_user(username)

    if result.is_success:
        click.echo(f'User created successfully: {result.data.username}')
    else:
        raise click.ClickException(f'Failed to create user: {result.error}')


@click.command('seed')
@with_appcontext
def seed():
    """Create the tables and load a small demo catalog"""
    db.create_all()
    work_service = current_app.services.get('work')

    created = 0
    for work_data in DEMO_CATALOG:
        result = work_service.create_work(work_data)
        if result.is_success:
            created += 1
        else:
            click.echo(f"Skipped {work_data['title']}: {result.error}")

    click.echo(f'Seeded {created} works')


def init_app(app):
    """Register commands with the Flask app"""
    app.cli.add_command(create_user)
    app.cli.add_command(seed)
