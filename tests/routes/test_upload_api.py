"""Tests for the two-step PDF upload through the JSON API."""
from __future__ import annotations

import io

from janatar_bhasha.models import Epaper
from tests.conftest import make_pdf


def upload(client, body, file_name="edition.pdf", day="2026-10-19", content_type="application/pdf"):
    return client.post(
        "/api/upload-epaper",
        data={"file": (io.BytesIO(body), file_name, content_type), "date": day},
        content_type="multipart/form-data",
    )


def test_upload_requires_login(client, fake_storage):
    resp = upload(client, make_pdf())
    assert resp.status_code == 401
    assert fake_storage.uploads == []


def test_upload_then_create_record(app, admin_client, admin_user, fake_storage):
    resp = upload(admin_client, make_pdf(pages=6))
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["success"] is True
    assert data["page_count"] == 6
    assert data["date"] == "2026-10-19"
    assert data["uploaded_by"] == admin_user
    assert data["file_id"] == "pdfs/2026-10-19/edition.pdf"
    assert len(fake_storage.uploads) == 1

    with app.app_context():
        assert Epaper.query.count() == 0

    payload = {key: data[key] for key in
               ("date", "pdf_url", "file_id", "file_name", "file_size", "page_count", "uploaded_by")}
    resp = admin_client.post("/api/papers", json=payload)
    assert resp.status_code == 201
    assert resp.get_json()["paper"]["page_count"] == 6


def test_upload_rejects_non_pdf(admin_client, fake_storage):
    resp = upload(admin_client, b"plain text", file_name="notes.txt", content_type="text/plain")
    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Only PDF files are allowed"
    assert fake_storage.uploads == []


def test_upload_rejects_unreadable_pdf(admin_client, fake_storage):
    resp = upload(admin_client, b"this is not really a pdf")
    assert resp.status_code == 400
    assert fake_storage.uploads == []


def test_upload_requires_file_and_date(admin_client, fake_storage):
    resp = admin_client.post("/api/upload-epaper", data={"date": "2026-10-19"},
                             content_type="multipart/form-data")
    assert resp.status_code == 400
    assert resp.get_json()["message"] == "File and date are required"

    resp = upload(admin_client, make_pdf(), day="")
    assert resp.status_code == 400


def test_upload_rejects_malformed_date(admin_client, fake_storage):
    resp = upload(admin_client, make_pdf(), day="19/10/2026")
    assert resp.status_code == 400
    assert fake_storage.uploads == []


def test_storage_failure_is_bad_gateway(admin_client, fake_storage):
    fake_storage.fail_upload = True
    resp = upload(admin_client, make_pdf())
    assert resp.status_code == 502
    assert resp.get_json()["success"] is False
