"""Tests for the flask CLI commands."""
from __future__ import annotations

import pytest

from janatar_bhasha.commands import create_admin_user
from janatar_bhasha.exceptions import InvalidInput
from janatar_bhasha.extensions import db
from janatar_bhasha.models import User


def test_create_admin_command(app):
    runner = app.test_cli_runner()
    result = runner.invoke(args=["create-admin", "--email", "Editor@Example.com",
                                 "--name", "Editor", "--password", "s3cret-pass"])
    assert result.exit_code == 0
    assert "Admin user created: editor@example.com" in result.output

    with app.app_context():
        user = User.query.filter_by(email="editor@example.com").one()
        assert user.is_admin()
        assert user.check_password("s3cret-pass")


def test_create_admin_promotes_existing_user(app):
    with app.app_context():
        user = User(email="reader@example.com", name="Reader", role="reader", is_active=False)
        user.set_password("reader-pass")
        db.session.add(user)
        db.session.commit()

    result = app.test_cli_runner().invoke(args=["create-admin", "--email", "reader@example.com",
                                                "--name", "Reader", "--password", "whatever"])
    assert "already exists, updated to admin role" in result.output

    with app.app_context():
        user = User.query.filter_by(email="reader@example.com").one()
        assert user.role == "admin"
        assert user.is_active is True
        assert user.check_password("reader-pass")


def test_init_db_command(app):
    result = app.test_cli_runner().invoke(args=["init-db"])
    assert result.exit_code == 0
    assert "Database tables created." in result.output


def test_create_admin_rejects_malformed_email(app):
    result = app.test_cli_runner().invoke(args=["create-admin", "--email", "editor@localhost",
                                                "--name", "Editor", "--password", "s3cret-pass"])
    assert result.exit_code == 1
    assert "Invalid email address" in result.output

    with app.app_context():
        assert User.query.count() == 0


def test_create_admin_user_validates_input(app):
    with app.app_context():
        with pytest.raises(InvalidInput):
            create_admin_user("no-at-sign", "pass", "Nobody")
        with pytest.raises(InvalidInput):
            create_admin_user("editor@example.com", "", "Editor")
        user, created = create_admin_user(" Editor@Newsroom.Local ", "pass", "Editor")
        assert created
        assert user.email == "editor@newsroom.local"
