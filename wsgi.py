"""WSGI entry point: `flask --app wsgi run` or `gunicorn wsgi:app`."""

from janatar_bhasha import create_app

app = create_app()
