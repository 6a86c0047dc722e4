"""
yt-dlp metadata lookup for known social/video platforms.

Asks yt-dlp for a URL's info dict (no download) and maps it onto the fields
the enrichment pipeline uses. Failures come back as
{'success': False, 'reason': ..., 'error': ..., 'fallback': ...} so the
caller can fall back to HTML extraction.
"""

from typing import Dict

from .platform_utils import PLATFORMS, detect_platform, platform_fields

# Platforms yt-dlp is tried for before falling back to HTML parsing
TOOL_PLATFORMS = {name for name, _, _ in PLATFORMS}

YDL_OPTS = {
    'quiet': True,
    'no_warnings': True,
    'noplaylist': True,
    'skip_download': True,
}

# Failure reasons
NOT_INSTALLED = 'not_installed'
UNSUPPORTED_URL = 'unsupported_url'
EXTRACTION_FAILED = 'extraction_failed'
INVALID_OUTPUT = 'invalid_output'


def is_tool_supported_url(url: str) -> bool:
    """Check if yt-dlp should be tried for this URL."""
    return detect_platform(url)['platform'] in TOOL_PLATFORMS


def _failure(reason: str, error: str, fallback: bool = True) -> Dict:
    return {'success': False, 'reason': reason, 'error': error, 'fallback': fallback}


def map_tool_metadata(metadata: Dict, url: str) -> Dict:
    """Pick the fields we care about out of a yt-dlp info dict."""
    extracted = {
        'title': metadata.get('title') or metadata.get('fulltitle') or 'Untitled',
        'description': metadata.get('description') or '',
        'author': metadata.get('uploader') or metadata.get('channel') or metadata.get('creator') or '',
        'extractor': metadata.get('extractor') or 'Unknown',
        'duration': metadata.get('duration'),
        'view_count': metadata.get('view_count'),
        'like_count': metadata.get('like_count'),
        'comment_count': metadata.get('comment_count'),
        'upload_date': metadata.get('upload_date'),
        'thumbnail_url': metadata.get('thumbnail'),
        'tags': metadata.get('tags') or [],
        'categories': metadata.get('categories') or [],
        'webpage_url': metadata.get('webpage_url') or url,
        'format': metadata.get('format') or metadata.get('ext'),
    }

    extractor = (metadata.get('extractor') or '').lower()
    if extractor == 'instagram':
        extracted['media_type'] = metadata.get('_type') or 'video'
        extracted['timestamp'] = metadata.get('timestamp')
    elif extractor == 'youtube':
        extracted['channel_id'] = metadata.get('channel_id')
        extracted['channel_url'] = metadata.get('channel_url')

    return extracted


def fetch_tool_metadata(url: str) -> Dict:
    """
    Look up a URL with yt-dlp without downloading anything.

    Returns:
        On success: {'success': True, 'extracted': dict, 'url': canonical url}
        On failure: {'success': False, 'reason': str, 'error': str, 'fallback': bool}
    """
    # A missing install is reported as NOT_INSTALLED rather than raised
    try:
        import yt_dlp
    except ImportError as e:
        return _failure(NOT_INSTALLED, f"yt-dlp is not installed: {e}")

    try:
        with yt_dlp.YoutubeDL(YDL_OPTS) as ydl:
            metadata = ydl.extract_info(url, download=False)
    except yt_dlp.utils.DownloadError as e:
        message = str(e)
        if 'Unsupported URL' in message:
            return _failure(UNSUPPORTED_URL, message)
        return _failure(EXTRACTION_FAILED, message)
    except Exception as e:
        print(f"yt-dlp error for {url}: {e}")
        return _failure(EXTRACTION_FAILED, str(e))

    if not isinstance(metadata, dict):
        return _failure(INVALID_OUTPUT, 'yt-dlp returned no info dict')

    extracted = map_tool_metadata(metadata, url)
    return {'success': True, 'extracted': extracted, 'url': extracted['webpage_url']}


def tool_result_to_extracted(url: str, extracted: Dict) -> Dict:
    """
    Convert yt-dlp fields into an ExtractedContent dict.

    The platform comes from our own URL table so it stays within the fixed
    platform set; yt-dlp's extractor id is kept in metadata.
    """
    content = platform_fields(url)

    for key in ('title', 'description', 'author', 'thumbnail_url'):
        if extracted.get(key):
            content[key] = extracted[key]

    metadata = {
        key: extracted.get(key)
        for key in ('extractor', 'tags', 'view_count', 'like_count', 'upload_date', 'duration')
        if extracted.get(key) is not None
    }
    if metadata:
        content['metadata'] = metadata

    return content
