"""
Configuration package for the pagination service.
"""

import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# === CONFIG ===
SECRET_KEY = os.getenv("SECRET_KEY", "your-secret-key-change-this-in-production")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Pagination defaults
PAGINATION_MAX_PAGES_TO_SHOW = int(os.getenv("PAGINATION_MAX_PAGES_TO_SHOW", "10"))
PAGINATION_DEFAULT_PER_PAGE = int(os.getenv("PAGINATION_DEFAULT_PER_PAGE", "20"))
PAGINATION_PREVIOUS_TEXT = os.getenv("PAGINATION_PREVIOUS_TEXT", "Previous")
PAGINATION_NEXT_TEXT = os.getenv("PAGINATION_NEXT_TEXT", "Next")
PAGINATION_URL_PATTERN = os.getenv("PAGINATION_URL_PATTERN", "?page=(:num)")

__all__ = [
    'SECRET_KEY',
    'LOG_LEVEL',
    'PAGINATION_MAX_PAGES_TO_SHOW',
    'PAGINATION_DEFAULT_PER_PAGE',
    'PAGINATION_PREVIOUS_TEXT',
    'PAGINATION_NEXT_TEXT',
    'PAGINATION_URL_PATTERN',
]
