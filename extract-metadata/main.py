"""
Extract Metadata Cloud Function

Returns yt-dlp metadata (title, uploader, counts, tags, ...) for a social or
video URL without downloading the media.
"""

import functions_framework
import json
import os
import sys
import traceback

# Add enrichment package to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))
from enrichment.ytdlp_utils import NOT_INSTALLED, fetch_tool_metadata


@functions_framework.http
def extract_metadata(request):
    """
    Main Cloud Function entry point.

    Expected JSON input:
    {
        "url": "https://www.youtube.com/watch?v=abc123"
    }
    """
    if request.method == 'OPTIONS':
        headers = {
            'Access-Control-Allow-Origin': '*',
            'Access-Control-Allow-Methods': 'POST',
            'Access-Control-Allow-Headers': 'Content-Type',
            'Access-Control-Max-Age': '3600'
        }
        return ('', 204, headers)

    headers = {'Access-Control-Allow-Origin': '*'}

    try:
        request_json = request.get_json(silent=True)

        url = (request_json or {}).get('url')
        if not url:
            return (json.dumps({'error': 'URL is required'}), 400, headers)

        result = fetch_tool_metadata(url)

        if result['success']:
            return (json.dumps(result), 200, headers)

        if result['reason'] == NOT_INSTALLED:
            return (json.dumps({
                'error': 'yt-dlp is not installed. Please install it first: pip install yt-dlp',
                'details': result['error'],
            }), 500, headers)

        return (json.dumps({
            'error': 'Could not extract metadata from this URL',
            'details': result['error'],
            'reason': result['reason'],
            'fallback': result['fallback'],
        }), 400, headers)

    except Exception as e:
        print(f"Metadata extraction error: {str(e)}\n{traceback.format_exc()}")
        return (json.dumps({
            'error': 'Failed to extract metadata',
            'details': str(e),
        }), 500, headers)
