"""
Scrapers module - External API clients.

Provides clients for:
- Devfolio: Project details, builders and hashtags
"""
from .devfolio_client import (
    DevfolioClient,
    extract_slug_from_url,
    get_image_url,
    get_pictures,
    get_links,
)

__all__ = [
    "DevfolioClient",
    "extract_slug_from_url",
    "get_image_url",
    "get_pictures",
    "get_links",
]
