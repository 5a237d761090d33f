"""
Input Sanitization Utilities

HTML sanitization applied to translated text before it is stored, so the
public site can render blog content without re-escaping it.
"""

import html
import re
from typing import List, Optional

import bleach


# Allowed tags for rich content (blog article bodies and excerpts)
RICH_CONTENT_TAGS = [
    'p', 'br', 'strong', 'em', 'u', 'h1', 'h2', 'h3', 'h4', 'h5', 'h6',
    'blockquote', 'code', 'pre', 'hr', 'ul', 'ol', 'li', 'a', 'img',
    'table', 'thead', 'tbody', 'tr', 'th', 'td', 'div', 'span', 'figure', 'figcaption'
]

# Allowed attributes for rich content
RICH_CONTENT_ATTRS = {
    'a': ['href', 'title', 'target', 'rel'],
    'img': ['src', 'alt', 'title', 'width', 'height'],
    'code': ['class'],
    'pre': ['class'],
    'div': ['class', 'dir'],
    'span': ['class', 'dir'],
    'p': ['dir'],
    'table': ['class'],
}

# Allowed protocols for URLs
ALLOWED_PROTOCOLS = ['http', 'https', 'mailto']


def sanitize_html(
    text: Optional[str],
    tags: Optional[List[str]] = None,
    attributes: Optional[dict] = None,
    strip: bool = False
) -> str:
    """
    Sanitize HTML content to prevent XSS attacks.

    Args:
        text: The HTML text to sanitize
        tags: List of allowed HTML tags (default: RICH_CONTENT_TAGS)
        attributes: Dict of allowed attributes per tag (default: RICH_CONTENT_ATTRS)
        strip: If True, strip all HTML tags

    Returns:
        Sanitized HTML string
    """
    if text is None:
        return ""

    if strip:
        return bleach.clean(text, tags=[], strip=True)

    allowed_tags = tags if tags is not None else RICH_CONTENT_TAGS
    allowed_attrs = attributes if attributes is not None else RICH_CONTENT_ATTRS

    return bleach.clean(
        text,
        tags=allowed_tags,
        attributes=allowed_attrs,
        protocols=ALLOWED_PROTOCOLS,
        strip=True,
    )


def sanitize_plain_text(text: Optional[str]) -> str:
    """
    Strip all HTML tags and return plain text only.
    Used for titles, authors, categories and SEO fields.

    The result is stored and compared as text, so entities bleach produces
    ("&amp;", "&lt;") are decoded back to the characters they stand for.
    """
    if text is None:
        return ""

    cleaned = html.unescape(bleach.clean(text, tags=[], strip=True))
    cleaned = re.sub(r'\s+', ' ', cleaned).strip()

    return cleaned


def sanitize_rich_content(text: Optional[str]) -> str:
    """Sanitize rich HTML content such as blog articles."""
    return sanitize_html(
        text,
        tags=RICH_CONTENT_TAGS,
        attributes=RICH_CONTENT_ATTRS
    )


def sanitize_tags(tags: Optional[List[str]]) -> List[str]:
    """Plain-text each tag, drop empties and duplicates, keep first-seen order."""
    if not tags:
        return []

    seen = []
    for tag in tags:
        cleaned = sanitize_plain_text(tag)
        if cleaned and cleaned not in seen:
            seen.append(cleaned)
    return seen


def sanitize_email(email: Optional[str]) -> str:
    """
    Basic email sanitization.
    Note: Pydantic EmailStr already validates format.
    """
    if not email:
        return ""

    return sanitize_plain_text(email).lower()
