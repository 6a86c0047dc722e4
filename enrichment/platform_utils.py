"""
Platform detection for the content enrichment pipeline.

Platforms are matched by URL pattern against an ordered table; the first
match wins and anything unmatched is a generic Website.
"""

import re
from typing import Dict, Optional

DEFAULT_PLATFORM = 'Website'
DEFAULT_CONTENT_TYPE = 'Article'

# (platform name, URL patterns, default content type) - order matters
PLATFORMS = [
    ('Instagram', ('instagram.com',), None),
    ('TikTok', ('tiktok.com',), 'Video'),
    ('YouTube', ('youtube.com', 'youtu.be'), 'Video'),
    ('Twitter/X', ('twitter.com', 'x.com'), 'Tweet'),
]

PLATFORM_NAMES = [name for name, _, _ in PLATFORMS] + [DEFAULT_PLATFORM]

# Instagram path segment -> content type, checked in order
INSTAGRAM_CONTENT_TYPES = [
    ('/reel/', 'Reel'),
    ('/p/', 'Post'),
    ('/tv/', 'Video'),
    ('/stories/', 'Story'),
]

# Shortcode token -> label used for placeholder titles
INSTAGRAM_SHORTCODE_LABELS = {
    'reel': 'Reel',
    'p': 'Post',
    'tv': 'Video',
}

# First path segments that are routes, not usernames
INSTAGRAM_RESERVED_SEGMENTS = {'reel', 'reels', 'p', 'tv', 'stories', 'explore'}

INSTAGRAM_SHORTCODE_RE = re.compile(r'/(p|reel|tv)/([A-Za-z0-9_-]+)')
INSTAGRAM_PATH_RE = re.compile(r'instagram\.com/([^/?#]+)(?:/([^/?#]+))?', re.I)


def _matches_pattern(url: str, pattern: str) -> bool:
    """Substring match anchored at a host boundary ('netflix.com' is not 'x.com')."""
    return re.search(r'(?:^|[/.@])' + re.escape(pattern), url) is not None


def detect_platform(url: str) -> Dict[str, Optional[str]]:
    """
    Classify a URL against the platform table.

    Returns:
        Dict with 'platform' (always one of PLATFORM_NAMES) and
        'content_type' (may be None for Instagram paths we don't recognize)
    """
    lower_url = (url or '').lower()

    for name, patterns, content_type in PLATFORMS:
        if any(_matches_pattern(lower_url, pattern) for pattern in patterns):
            if name == 'Instagram':
                content_type = detect_instagram_content_type(lower_url)
            return {'platform': name, 'content_type': content_type}

    return {'platform': DEFAULT_PLATFORM, 'content_type': DEFAULT_CONTENT_TYPE}


def is_instagram_url(url: str) -> bool:
    """Check if URL is an Instagram URL."""
    return detect_platform(url)['platform'] == 'Instagram'


def detect_instagram_content_type(url: str) -> Optional[str]:
    """Map an Instagram URL path to Reel / Post / Video / Story."""
    lower_url = (url or '').lower()
    for segment, content_type in INSTAGRAM_CONTENT_TYPES:
        if segment in lower_url:
            return content_type
    return None


def parse_instagram_shortcode(url: str) -> Optional[Dict[str, str]]:
    """
    Extract the shortcode and its content-type token from an Instagram URL.

    Examples:
        >>> parse_instagram_shortcode('https://instagram.com/reel/ABC123/')
        {'kind': 'reel', 'shortcode': 'ABC123'}
    """
    match = INSTAGRAM_SHORTCODE_RE.search(url or '')
    if not match:
        return None
    return {'kind': match.group(1), 'shortcode': match.group(2)}


def parse_instagram_username(url: str) -> Optional[str]:
    """
    Extract the account name from an Instagram URL path.

    instagram.com/<user>/reel/... yields <user>; instagram.com/stories/<user>/...
    yields <user>; route-only paths like instagram.com/reel/... yield None.
    """
    match = INSTAGRAM_PATH_RE.search(url or '')
    if not match:
        return None

    first, second = match.group(1), match.group(2)
    if first.lower() == 'stories':
        return second if second and second.lower() not in INSTAGRAM_RESERVED_SEGMENTS else None
    if first.lower() in INSTAGRAM_RESERVED_SEGMENTS:
        return None
    return first


def platform_fields(url: str) -> Dict[str, str]:
    """
    The part of an ExtractedContent dict that the URL alone determines.

    Examples:
        >>> platform_fields('https://youtu.be/abc')
        {'platform': 'YouTube', 'content_type': 'Video'}
    """
    platform = detect_platform(url)
    fields = {'platform': platform['platform']}
    if platform['content_type']:
        fields['content_type'] = platform['content_type']
    return fields
