"""
OG module - Social preview images for project, sponsor and track pages.
"""
from .renderer import (
    ImageCache,
    OgAvatar,
    OgImageOptions,
    OgImageRenderer,
    OgStat,
    title_font_size,
    truncate_subtitle,
)
from .cards import project_card, sponsor_card, track_card, format_usd

__all__ = [
    "ImageCache",
    "OgAvatar",
    "OgImageOptions",
    "OgImageRenderer",
    "OgStat",
    "title_font_size",
    "truncate_subtitle",
    "project_card",
    "sponsor_card",
    "track_card",
    "format_usd",
]
