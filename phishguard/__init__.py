# phishguard/__init__.py
"""Офлайн-эвристики PhishGuard: письма, URL и пароли."""

from .email_analyzer import analyze_email
from .password_analyzer import analyze_password
from .url_analyzer import analyze_url

__version__ = "2.0.0"

__all__ = ["analyze_email", "analyze_url", "analyze_password", "__version__"]
