"""Shared fixtures: app on in-memory SQLite, admin login, PDFs, fake storage."""
from __future__ import annotations

import io
from datetime import date

import pytest
from PyPDF2 import PdfWriter

from janatar_bhasha import create_app
from janatar_bhasha.extensions import db, storage
from janatar_bhasha.models import ContactMessage, Epaper, User
from janatar_bhasha.services.storage import StoredFile

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "admin-pass-123"


def make_pdf(pages: int = 3) -> bytes:
    writer = PdfWriter()
    for _ in range(pages):
        writer.add_blank_page(width=595, height=842)
    buf = io.BytesIO()
    writer.write(buf)
    return buf.getvalue()


class FakeStorage:
    """Records uploads/deletes instead of talking to S3."""

    def __init__(self):
        self.uploads: list[StoredFile] = []
        self.deleted: list[str] = []
        self.fail_upload = False

    def upload(self, stream, file_name, day):
        from janatar_bhasha.exceptions import StorageError

        if self.fail_upload:
            raise StorageError("Upload failed: bucket unavailable")
        body = stream.read()
        key = f"pdfs/{day.isoformat()}/{file_name}"
        stored = StoredFile(url=f"https://cdn.example.test/{key}", file_id=key, name=file_name, size=len(body))
        self.uploads.append(stored)
        return stored

    def delete(self, file_id):
        self.deleted.append(file_id)


@pytest.fixture
def app():
    app = create_app("testing")
    with app.app_context():
        db.create_all()
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_user(app):
    with app.app_context():
        user = User(email=ADMIN_EMAIL, name="Site Admin", role="admin")
        user.set_password(ADMIN_PASSWORD)
        db.session.add(user)
        db.session.commit()
        return user.id


@pytest.fixture
def admin_client(app, admin_user):
    client = app.test_client()
    resp = client.post("/login", data={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert resp.status_code == 302
    return client


@pytest.fixture
def fake_storage(monkeypatch):
    fake = FakeStorage()
    monkeypatch.setattr(storage, "upload", fake.upload)
    monkeypatch.setattr(storage, "delete", fake.delete)
    return fake


@pytest.fixture
def add_paper(app, admin_user):
    """Insert an e-paper for a date and return its id."""

    def _add(day: date, views: int = 0, page_count: int | None = 4) -> int:
        with app.app_context():
            paper = Epaper(
                date=day,
                pdf_url=f"https://cdn.example.test/pdfs/{day.isoformat()}.pdf",
                file_id=f"pdfs/{day.isoformat()}.pdf",
                file_name=f"{day.isoformat()}.pdf",
                file_size=1024,
                page_count=page_count,
                uploaded_by=admin_user,
                views=views,
            )
            db.session.add(paper)
            db.session.commit()
            return paper.id

    return _add


@pytest.fixture
def add_message(app):
    def _add(name="Rahim", email="rahim@example.com", is_read=False, **extra) -> int:
        with app.app_context():
            message = ContactMessage(name=name, email=email, message=extra.pop("message", "Hello"),
                                     is_read=is_read, **extra)
            db.session.add(message)
            db.session.commit()
            return message.id

    return _add
