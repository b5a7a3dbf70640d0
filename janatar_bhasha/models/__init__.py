"""Database models package."""

from .user import User
from .epaper import Epaper
from .contact import ContactMessage

__all__ = [
    'User',
    'Epaper',
    'ContactMessage',
]
