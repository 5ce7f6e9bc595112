"""Session handlers — concrete persistence strategies."""

from sessionfly.session.adapters.cache import CacheSessionHandler
from sessionfly.session.adapters.cookie import CookieSessionHandler, EncryptedCookieSessionHandler
from sessionfly.session.adapters.file import FileSessionHandler

__all__ = [
    "CacheSessionHandler",
    "CookieSessionHandler",
    "EncryptedCookieSessionHandler",
    "FileSessionHandler",
]
