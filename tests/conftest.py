"""Shared fixtures for the test suite."""

from datetime import datetime, timezone

import pytest

FIXED_NOW = datetime(2026, 10, 19, 8, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def clock():
    return lambda: FIXED_NOW


def build_page(
    title: str = "A Perfectly Reasonable Page Title",
    description: str = "d" * 140,
    body: str = "<h1>Main heading</h1>",
    head_extra: str = (
        '<link rel="canonical" href="https://example.com/page">'
        '<meta property="og:title" content="Title">'
        '<meta property="og:description" content="Description">'
    ),
) -> str:
    """HTML for a page that passes every SEO rule unless overridden."""
    meta = f'<meta name="description" content="{description}">' if description is not None else ""
    return (
        f"<html><head><title>{title}</title>{meta}{head_extra}</head>"
        f"<body>{body}</body></html>"
    )
