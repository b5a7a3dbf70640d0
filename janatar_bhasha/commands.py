"""``flask`` CLI commands."""

import click
from flask import Flask

from janatar_bhasha.exceptions import InvalidInput
from janatar_bhasha.extensions import db
from janatar_bhasha.models import User
from janatar_bhasha.utils.validators import is_valid_email


def create_admin_user(email, password, name):
    """Create an admin, or promote the existing account with that email.

    Returns ``(user, created)``.
    """
    email = email.strip().lower()
    if not is_valid_email(email):
        raise InvalidInput(f'Invalid email address: {email!r}')
    if not password:
        raise InvalidInput('Password is required')

    user = User.query.filter_by(email=email).first()
    if user is not None:
        user.role = 'admin'
        user.is_active = True
        db.session.commit()
        return user, False

    user = User(email=email, name=name, role='admin')
    user.set_password(password)
    db.session.add(user)
    db.session.commit()
    return user, True


def register_commands(app: Flask):

    @app.cli.command('init-db')
    def init_db():
        """Create all tables (use `flask db upgrade` once migrations exist)."""
        db.create_all()
        click.echo('Database tables created.')

    @app.cli.command('create-admin')
    @click.option('--email', prompt=True)
    @click.option('--name', prompt='Full name')
    @click.option('--password', prompt=True, hide_input=True, confirmation_prompt=True)
    def create_admin(email, name, password):
        """Create a dashboard administrator."""
        try:
            user, created = create_admin_user(email, password, name)
        except InvalidInput as e:
            raise click.ClickException(e.message)
        if created:
            click.echo(f'Admin user created: {user.email}')
        else:
            click.echo(f'User {user.email} already exists, updated to admin role.')
