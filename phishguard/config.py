# phishguard/config.py
import os

LOG_LEVEL = os.getenv("PHISHGUARD_LOG_LEVEL", "INFO").upper()

# Веб-почта, из которой расширение обращается к API
DEFAULT_ALLOWED_ORIGINS = [
    "https://mail.google.com",
    "https://outlook.live.com",
    "https://outlook.office.com",
    "https://mail.yahoo.com",
]


def _split_origins(value):
    return [origin.strip() for origin in value.split(",") if origin.strip()]


ALLOWED_ORIGINS = _split_origins(os.getenv("PHISHGUARD_ALLOWED_ORIGINS", "")) or DEFAULT_ALLOWED_ORIGINS
