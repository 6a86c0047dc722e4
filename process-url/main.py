"""
Process URL Cloud Function

Turns a pasted URL into a pre-filled Explore Tracker item.

Pipeline (strictly sequential):
1. yt-dlp metadata lookup for known platforms (Instagram, YouTube, TikTok, Twitter/X)
2. Otherwise fetch the page and extract metadata from its HTML
3. Mine insights from title + description
4. Keyword-categorize the description
5. AI enrichment (best effort, falls back to a neutral analysis)
6. Merge everything into suggested_data

Does NOT:
- Save the item (the item store's job)
- Retry or rate limit upstream calls
- Cache fetched pages or AI responses
"""

import functions_framework
import requests
import json
import os
import sys
import traceback

# Add enrichment package to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))
from enrichment.config_utils import env_number
from enrichment.metadata_utils import extract_metadata_from_html
from enrichment.platform_utils import platform_fields
from enrichment.insight_utils import extract_insights
from enrichment.category_utils import categorize_content
from enrichment.ai_utils import run_analysis
from enrichment.ytdlp_utils import fetch_tool_metadata, is_tool_supported_url, tool_result_to_extracted
from enrichment.suggestion_utils import build_suggested_record

# Configuration
FETCH_TIMEOUT = env_number('FETCH_TIMEOUT', 30, int)
USER_AGENT = 'Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36'
DEFAULT_AI_TITLE = 'Social Media Content'


def fetch_webpage(url: str) -> tuple:
    """Fetch webpage content. Returns (html, error)."""
    try:
        headers = {
            'User-Agent': USER_AGENT,
            'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
            'Accept-Language': 'en-US,en;q=0.5',
        }

        response = requests.get(url, headers=headers, timeout=FETCH_TIMEOUT, allow_redirects=True)
        response.raise_for_status()

        return response.text, None

    except requests.exceptions.Timeout:
        return None, 'Request timed out'
    except requests.exceptions.HTTPError as e:
        return None, f'HTTP error: {e.response.status_code}'
    except requests.exceptions.RequestException as e:
        return None, f'Request failed: {str(e)}'


def extract_content(url: str) -> tuple:
    """
    Get ExtractedContent for a URL, trying yt-dlp before HTML parsing.

    Returns:
        (extracted, errors) - errors is a list of recoverable stage errors
    """
    errors = []

    if is_tool_supported_url(url):
        tool_result = fetch_tool_metadata(url)
        if tool_result.get('success'):
            return tool_result_to_extracted(url, tool_result['extracted']), errors
        print(f"yt-dlp extraction failed ({tool_result.get('reason')}), falling back to HTML parsing: "
              f"{tool_result.get('error')}")

    html, fetch_error = fetch_webpage(url)
    if fetch_error:
        print(f"Fetch failed for {url}: {fetch_error}")
        errors.append({'stage': 'fetch', 'message': fetch_error, 'recoverable': True})
        return platform_fields(url), errors

    return extract_metadata_from_html(html, url), errors


def process_url_content(url: str) -> dict:
    """
    Run the full enrichment pipeline for one URL.

    Returns:
        Dict with url, extracted, insights, categorization, ai_analysis,
        suggested_data and, when something upstream failed, errors
    """
    extracted, errors = extract_content(url)

    title = extracted.get('title')
    description = extracted.get('description')

    insights = extract_insights(f"{title or ''} {description or ''}")
    categorization = categorize_content(description or '')

    ai_analysis = None
    ai_succeeded = False
    if title or description:
        ai_result = run_analysis(title or DEFAULT_AI_TITLE, description, url)
        ai_analysis = ai_result['analysis']
        ai_succeeded = ai_result['success']

    result = {
        'url': url,
        'extracted': extracted,
        'insights': insights,
        'categorization': categorization,
        'ai_analysis': ai_analysis,
        'suggested_data': build_suggested_record(
            url, extracted, insights, categorization, ai_analysis, ai_succeeded
        ),
    }

    if errors:
        result['errors'] = errors

    return result


@functions_framework.http
def process_url(request):
    """
    Main Cloud Function entry point.

    Expected JSON input:
    {
        "url": "https://www.instagram.com/reel/ABC123/"
    }
    """
    # Handle CORS
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
        if not url or not isinstance(url, str) or not url.strip():
            return (json.dumps({'error': 'URL is required'}), 400, headers)

        result = process_url_content(url.strip())
        return (json.dumps(result), 200, headers)

    except Exception as e:
        print(f"URL processing error: {str(e)}\n{traceback.format_exc()}")
        return (json.dumps({'error': 'Failed to process URL'}), 500, headers)
