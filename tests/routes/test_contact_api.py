"""Tests for /api/contact endpoints."""
from __future__ import annotations

import pytest

from janatar_bhasha.extensions import db
from janatar_bhasha.models import ContactMessage


def valid_message(**overrides):
    payload = {
        "name": "করিম",
        "email": "karim@example.com",
        "phone": "01700000000",
        "subject": "Subscription",
        "message": "How do I subscribe to the print edition?",
    }
    payload.update(overrides)
    return payload


def test_create_message(app, client):
    resp = client.post("/api/contact", json=valid_message())
    assert resp.status_code == 201
    message = resp.get_json()["message"]
    assert message["is_read"] is False
    assert message["subject"] == "Subscription"

    with app.app_context():
        assert ContactMessage.query.count() == 1


def test_optional_fields_may_be_omitted(client):
    resp = client.post("/api/contact", json=valid_message(phone=None, subject=""))
    assert resp.status_code == 201
    message = resp.get_json()["message"]
    assert message["phone"] is None
    assert message["subject"] is None


@pytest.mark.parametrize("missing", ["name", "email", "message"])
def test_required_fields(app, client, missing):
    resp = client.post("/api/contact", json=valid_message(**{missing: ""}))
    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Name, email, and message are required"

    with app.app_context():
        assert ContactMessage.query.count() == 0


@pytest.mark.parametrize("email", ["foo@bar", "foo bar@example.com", "@example.com", "foo@.com"])
def test_malformed_email_rejected(client, email):
    resp = client.post("/api/contact", json=valid_message(email=email))
    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Invalid email address"


def test_list_messages_requires_login(client):
    assert client.get("/api/contact").status_code == 401


def test_list_messages_newest_first(admin_client, add_message):
    add_message(name="First")
    add_message(name="Second")

    resp = admin_client.get("/api/contact")
    assert resp.status_code == 200
    assert [m["name"] for m in resp.get_json()] == ["Second", "First"]


def test_mark_read_and_unread(app, admin_client, add_message):
    message_id = add_message()

    resp = admin_client.patch(f"/api/contact?id={message_id}", json={"is_read": True})
    assert resp.status_code == 200
    assert resp.get_json()["message"]["is_read"] is True

    resp = admin_client.patch(f"/api/contact?id={message_id}", json={"is_read": False})
    assert resp.get_json()["message"]["is_read"] is False

    with app.app_context():
        assert db.session.get(ContactMessage, message_id).is_read is False


def test_mark_read_validation(admin_client, add_message):
    message_id = add_message()
    assert admin_client.patch("/api/contact", json={"is_read": True}).status_code == 400
    assert admin_client.patch(f"/api/contact?id={message_id}", json={"is_read": "yes"}).status_code == 400
    assert admin_client.patch("/api/contact?id=999", json={"is_read": True}).status_code == 404


def test_mark_read_requires_login(client, add_message):
    message_id = add_message()
    assert client.patch(f"/api/contact?id={message_id}", json={"is_read": True}).status_code == 401


def test_delete_message(app, admin_client, add_message):
    message_id = add_message()
    resp = admin_client.delete(f"/api/contact?id={message_id}")
    assert resp.status_code == 200

    with app.app_context():
        assert db.session.get(ContactMessage, message_id) is None


def test_delete_missing_message_is_not_found(admin_client):
    resp = admin_client.delete("/api/contact?id=999")
    assert resp.status_code == 404
    assert resp.get_json()["message"] == "Message not found"


def test_delete_message_requires_login(client, add_message):
    message_id = add_message()
    assert client.delete(f"/api/contact?id={message_id}").status_code == 401
