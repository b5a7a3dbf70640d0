"""Tests for the application factory."""
from __future__ import annotations

import pytest

from janatar_bhasha import create_app
from janatar_bhasha.config import config


def test_unknown_timezone_fails_at_startup(monkeypatch):
    monkeypatch.setattr(config["testing"], "EPAPER_TIMEZONE", "Asia/Dhaka ")
    with pytest.raises(ValueError, match="Unknown EPAPER_TIMEZONE"):
        create_app("testing")


def test_named_timezone_is_accepted(monkeypatch):
    monkeypatch.setattr(config["testing"], "EPAPER_TIMEZONE", "Asia/Dhaka")
    app = create_app("testing")
    assert app.config["EPAPER_TIMEZONE"] == "Asia/Dhaka"
