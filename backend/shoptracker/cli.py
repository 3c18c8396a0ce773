# Overview: Flask CLI command groups for bootstrap, inspection, and maintenance.

# backend/shoptracker/cli.py
# Commands Legend (run from the backend directory):
# Prereqs:
# - Activate your virtualenv.
# - Set FLASK_APP to wsgi.py (PowerShell: $env:FLASK_APP="wsgi.py").
# - Use: python -m flask <group> <command> [options]
#
# System bootstrap/repair:
# - python -m flask system init
#   Create tables and the default owner account (idempotent).
# - python -m flask system reset-data --yes
#   Delete all shops, sales, expenses and store values (keeps users).
#
# User inspection/bootstrap:
# - python -m flask users list
# - python -m flask users create --name "Owner" --email owner@shoptracker.local --password "Password123!"
#
# Maintenance:
# - python -m flask sessions cleanup --retention-days 30
#   Delete expired/revoked sessions older than the retention window.

import click
from flask.cli import with_appcontext

from .extensions import db
from .models import User
from .services.auth_service import create_user, PasswordValidationError
from .services import session_service
from .services import settings_service

DEFAULT_OWNER_NAME = "Shop Owner"
DEFAULT_OWNER_EMAIL = "owner@shoptracker.local"
DEFAULT_OWNER_PASSWORD = "Password123!"


@click.group('system')
def system_group():
    """System bootstrap and repair commands."""


@system_group.command('init')
@with_appcontext
def init_system():
    """
    Create all tables and a default owner account if no user exists.

    SECURITY: Change the default password immediately in production!
    """
    click.echo("START Initializing Shop Tracker...")
    db.create_all()
    click.echo("PASS Tables created")

    if db.session.query(User).first():
        click.echo("PASS Users already exist, skipping default owner")
        return

    try:
        create_user(DEFAULT_OWNER_NAME, DEFAULT_OWNER_EMAIL, DEFAULT_OWNER_PASSWORD)
    except (ValueError, PasswordValidationError) as e:
        click.echo(f"FAIL Failed to create default owner: {str(e)}")
        return

    click.echo(f"PASS Created owner: {DEFAULT_OWNER_EMAIL} / {DEFAULT_OWNER_PASSWORD}")
    click.echo("SECURITY Change this password immediately in production!")


@system_group.command('reset-data')
@click.option('--yes', is_flag=True, help='Skip confirmation')
@with_appcontext
def reset_data(yes):
    """
    DANGER: Delete every shop, sale, expense and store value.

    User accounts and sessions are kept.
    """
    if not yes:
        click.confirm("WARN This will DELETE all shop data. Are you sure?", abort=True)

    deleted = settings_service.reset_all_data(confirmed=True)
    for table, count in deleted.items():
        click.echo(f"DELETE  {table}: {count} rows")
    click.echo("PASS All data has been reset")


@click.group('users')
def users_group():
    """User inspection and bootstrap commands."""


@users_group.command('create')
@click.option('--name', prompt=True, help='Full name')
@click.option('--email', prompt=True, help='Email address')
@click.option('--password', prompt=True, hide_input=True, confirmation_prompt=True, help='Password')
@with_appcontext
def create_user_cli(name, email, password):
    """
    Create an owner account.

    Password must meet strength requirements:
    - Minimum 8 characters
    - At least one uppercase letter
    - At least one lowercase letter
    - At least one digit
    - At least one special character
    """
    try:
        user = create_user(name, email, password)
        click.echo(f"PASS Created user: {user.name} ({user.email})")
    except PasswordValidationError as e:
        click.echo(f"FAIL Password validation failed: {str(e)}")
        click.echo("Requirements: 8+ chars, uppercase, lowercase, digit, special char")
    except ValueError as e:
        click.echo(f"FAIL Failed to create user: {str(e)}")


@users_group.command('list')
@with_appcontext
def list_users():
    """List all users with their active status."""
    users = db.session.query(User).order_by(User.id.asc()).all()
    if not users:
        click.echo("No users found.")
        return

    click.echo("\n" + "="*80)
    click.echo(f"{'ID':<5} {'Name':<25} {'Email':<35} {'Active'}")
    click.echo("="*80)
    for user in users:
        active_str = "yes" if user.is_active else "no"
        click.echo(f"{user.id:<5} {user.name or '-':<25} {user.email:<35} {active_str}")
    click.echo("="*80 + "\n")


@click.group('sessions')
def sessions_group():
    """Session maintenance commands."""


@sessions_group.command('cleanup')
@click.option('--retention-days', default=30, show_default=True, type=int)
@with_appcontext
def cleanup_sessions(retention_days):
    """Delete expired and revoked sessions older than the retention window."""
    deleted = session_service.cleanup_expired_sessions(retention_days=retention_days)
    click.echo(f"PASS Deleted {deleted} sessions")


def register_commands(app):
    """Register all CLI commands with Flask app."""
    app.cli.add_command(system_group)
    app.cli.add_command(users_group)
    app.cli.add_command(sessions_group)
