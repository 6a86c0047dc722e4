"""
Shared pytest fixtures for the content enrichment tests.
"""

import pytest
import sys
import importlib.util
from pathlib import Path

# Project root for finding Cloud Function modules
PROJECT_ROOT = Path(__file__).parent.parent


def _load_module_from_path(module_name: str, file_path: Path):
    """Load a module from a specific file path."""
    spec = importlib.util.spec_from_file_location(module_name, file_path)
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    spec.loader.exec_module(module)
    return module


# Load Cloud Function modules with unique names at module load time
_process_url_module = _load_module_from_path(
    'process_url_main',
    PROJECT_ROOT / 'process-url' / 'main.py'
)

_extract_metadata_module = _load_module_from_path(
    'extract_metadata_main',
    PROJECT_ROOT / 'extract-metadata' / 'main.py'
)

_ai_analyzer_module = _load_module_from_path(
    'ai_analyzer_main',
    PROJECT_ROOT / 'ai-analyzer' / 'main.py'
)


# ============================================================================
# Process URL Function Fixtures
# ============================================================================

@pytest.fixture
def process_url_module():
    """Returns the loaded process-url module (for patching collaborators)."""
    return _process_url_module


@pytest.fixture
def fetch_webpage():
    """Returns fetch_webpage function from process-url."""
    return _process_url_module.fetch_webpage


@pytest.fixture
def process_url_content():
    """Returns the orchestrator from process-url."""
    return _process_url_module.process_url_content


@pytest.fixture
def process_url():
    """Returns main entry point from process-url."""
    return _process_url_module.process_url


# ============================================================================
# Extract Metadata / AI Analyzer Function Fixtures
# ============================================================================

@pytest.fixture
def extract_metadata_handler():
    """Returns main entry point from extract-metadata."""
    return _extract_metadata_module.extract_metadata


@pytest.fixture
def analyze_handler():
    """Returns analyze entry point from ai-analyzer."""
    return _ai_analyzer_module.analyze


@pytest.fixture
def smart_suggestions_handler():
    """Returns smart_suggestions entry point from ai-analyzer."""
    return _ai_analyzer_module.smart_suggestions


# ============================================================================
# Sample data
# ============================================================================

@pytest.fixture
def instagram_reel_html():
    """Instagram reel page with full Open Graph tags."""
    return """
    <!DOCTYPE html>
    <html>
    <head>
        <title>Instagram</title>
        <meta property="og:title" content="Jane Automates (@jane.builds) &#x2022; Instagram reel">
        <meta property="og:description" content="I automated my job hunt with n8n &amp; ChatGPT. Comment JOB and I&#39;ll send the workflow! #automation #n8n #jobsearch">
        <meta property="og:image" content="https://cdn.instagram.com/reel-thumb.jpg">
    </head>
    <body></body>
    </html>
    """


@pytest.fixture
def instagram_login_wall_html():
    """What Instagram serves logged-out clients: no useful meta tags."""
    return """
    <!DOCTYPE html>
    <html>
    <head><title>Instagram</title></head>
    <body><div id="react-root"></div></body>
    </html>
    """


@pytest.fixture
def sample_article_html():
    """Generic article page."""
    return """
    <!DOCTYPE html>
    <html>
    <head>
        <title>10 Python Tips &amp; Tricks | Example Blog</title>
        <meta name="description" content="Learn essential Python tips for building tools faster.">
        <meta property="og:image" content="https://example.com/image.jpg">
    </head>
    <body><article><h1>10 Python Tips</h1></article></body>
    </html>
    """


@pytest.fixture
def ytdlp_youtube_json():
    """Trimmed yt-dlp info dict for a YouTube video."""
    return {
        "id": "dQw4w9WgXcQ",
        "title": "Build an n8n workflow in 10 minutes",
        "description": "Step by step guide to automate your inbox.",
        "uploader": "Automation Channel",
        "extractor": "youtube",
        "duration": 612,
        "view_count": 12000,
        "like_count": 800,
        "comment_count": 42,
        "upload_date": "20240115",
        "thumbnail": "https://i.ytimg.com/vi/dQw4w9WgXcQ/hq.jpg",
        "tags": ["n8n", "automation"],
        "categories": ["Science & Technology"],
        "webpage_url": "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
        "channel_id": "UC123",
        "channel_url": "https://www.youtube.com/channel/UC123",
        "ext": "mp4",
    }


@pytest.fixture
def mock_flask_request():
    """Factory for creating mock Flask request objects."""
    class MockRequest:
        def __init__(self, json_data=None, method='POST'):
            self._json = json_data
            self.method = method
            self.data = b''

        def get_json(self, force=False, silent=False):
            return self._json

    return MockRequest
