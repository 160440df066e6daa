"""
CLI Commands

Maintenance tasks exposed through `flask --app authdash <command>`.
"""

import click
from flask import Blueprint

from authdash.extensions import db
from authdash.models import User, ServerSession

cli_bp = Blueprint('cli', __name__, cli_group=None)


@cli_bp.cli.command('init-db')
def init_db():
    """Create the users and sessions tables."""
    db.create_all()
    click.echo('Database tables created')


@cli_bp.cli.command('make-admin')
@click.argument('email')
def make_admin(email):
    """Promote the user registered under EMAIL to admin."""
    user = User.query.filter_by(email=email).first()
    if user is None:
        raise click.ClickException(f'No user registered with email {email}')
    
    if user.is_admin:
        click.echo(f'{email} is already an admin')
        return
    
    user.is_admin = True
    db.session.commit()
    click.echo(f'Existing user {email} promoted to admin')


@cli_bp.cli.command('purge-sessions')
def purge_sessions():
    """Delete expired session records."""
    count = ServerSession.purge_expired()
    click.echo(f'Removed {count} expired session(s)')
