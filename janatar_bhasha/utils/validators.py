"""Shared input checks for forms and the JSON API."""

import re

EMAIL_PATTERN = r'^[^\s@]+@[^\s@]+\.[^\s@]+$'
EMAIL_RE = re.compile(EMAIL_PATTERN)


def is_valid_email(value):
    """Loose address check: something@something.tld, no whitespace."""
    return bool(value) and EMAIL_RE.match(value) is not None
