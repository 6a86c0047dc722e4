"""
Platform-aware metadata extraction from raw HTML.

Produces an ExtractedContent dict:
    title, description, author, platform, content_type, thumbnail_url, metadata

Fields that cannot be derived are left out of the dict entirely. Extraction
never fails; an unmatched rule simply leaves its field unset.

Keys produced here, including the side-metadata ones (real_name, hashtags,
shortcode, requires_direct_access), are snake_case. The AIAnalysis dict is
the one exception in the pipeline output: it keeps the camelCase keys the
model is prompted to return (actionableInsights, and trendingTopics /
recommendations for smart suggestions).
"""

import re
from typing import Dict, Optional

from bs4 import BeautifulSoup

from .html_utils import decode_entities
from .platform_utils import (
    INSTAGRAM_SHORTCODE_LABELS,
    parse_instagram_shortcode,
    parse_instagram_username,
    platform_fields,
)

# Appended to synthesized Instagram descriptions; the AI adapter keys off it
DEGRADED_MARKER = 'Note: Full content details require visiting Instagram directly.'

# "Display Name (@username) • Instagram reel"
INSTAGRAM_AUTHOR_RE = re.compile(r'([^(]+)\s*\(@([^)]+)\)')
HASHTAG_RE = re.compile(r'#\w+')


def _meta_content(soup: BeautifulSoup, **attrs) -> Optional[str]:
    """Return the non-empty content attribute of the first matching <meta>."""
    tag = soup.find('meta', attrs=attrs)
    if tag is None:
        return None
    content = tag.get('content')
    return content if content else None


def _set_text(extracted: dict, key: str, value: Optional[str]) -> None:
    """Store a decoded text value, skipping empty results."""
    if value:
        extracted[key] = decode_entities(value)


def _add_metadata(extracted: dict, **values) -> None:
    extracted.setdefault('metadata', {}).update(values)


def _extract_instagram(extracted: dict, soup: BeautifulSoup, url: str) -> None:
    """Instagram rules: meta tags, author split, hashtags, degraded placeholder."""
    shortcode = parse_instagram_shortcode(url)
    username = parse_instagram_username(url)

    _set_text(
        extracted, 'title',
        _meta_content(soup, property='og:title') or _meta_content(soup, name='twitter:title')
    )
    _set_text(
        extracted, 'description',
        _meta_content(soup, property='og:description') or _meta_content(soup, name='description')
    )
    _set_text(extracted, 'thumbnail_url', _meta_content(soup, property='og:image'))

    title = extracted.get('title')
    if title:
        author_match = INSTAGRAM_AUTHOR_RE.search(title)
        if author_match:
            extracted['author'] = f"@{author_match.group(2)}"
            _add_metadata(extracted, real_name=author_match.group(1).strip())
        elif username:
            extracted['author'] = f"@{username}"

    description = extracted.get('description')
    if description:
        hashtags = HASHTAG_RE.findall(description)
        if hashtags:
            _add_metadata(extracted, hashtags=hashtags)

    # Login walls serve a bare "Instagram" title with no useful tags
    if not title or title == 'Instagram':
        if shortcode:
            label = INSTAGRAM_SHORTCODE_LABELS[shortcode['kind']]
            extracted['title'] = f"Instagram {label}"
            extracted['description'] = (
                f"View this Instagram {label} ({shortcode['shortcode']}). {DEGRADED_MARKER}"
            )
            _add_metadata(
                extracted,
                shortcode=shortcode['shortcode'],
                requires_direct_access=True,
            )

        if 'author' not in extracted and username:
            extracted['author'] = f"@{username}"


def extract_metadata_from_html(html: str, url: str) -> Dict:
    """
    Extract structured metadata from a fetched page.

    Platform-specific rules run first; generic <title>, description and
    image tags fill whatever is still missing.

    Args:
        html: Raw response body (may be empty)
        url: The URL the HTML was fetched from

    Returns:
        ExtractedContent dict
    """
    soup = BeautifulSoup(html or '', 'html.parser')
    extracted = platform_fields(url)

    if extracted['platform'] == 'Instagram':
        _extract_instagram(extracted, soup, url)

    if 'title' not in extracted:
        title_tag = soup.find('title')
        if title_tag:
            _set_text(extracted, 'title', title_tag.get_text().strip())

    if 'description' not in extracted:
        _set_text(extracted, 'description', _meta_content(soup, name='description'))

    if 'thumbnail_url' not in extracted:
        _set_text(
            extracted, 'thumbnail_url',
            _meta_content(soup, property='og:image') or _meta_content(soup, name='twitter:image')
        )

    return extracted
