"""
AI Analyzer Cloud Function

Entry points:
- analyze: category, tags, summary, insights and priority for one item
- smart_suggestions: trending topics and recommendations from recent items

Both always answer 200 with a well-formed body once input is valid; AI
failures produce the neutral fallback instead of an error.
"""

import functions_framework
import json
import os
import sys
import traceback

# Add enrichment package to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))
from enrichment.ai_utils import analyze_content, generate_smart_suggestions

CORS_PREFLIGHT_HEADERS = {
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Methods': 'POST',
    'Access-Control-Allow-Headers': 'Content-Type',
    'Access-Control-Max-Age': '3600'
}


@functions_framework.http
def analyze(request):
    """
    Expected JSON input:
    {
        "title": "n8n job hunting workflow",
        "description": "optional",
        "url": "optional"
    }
    """
    if request.method == 'OPTIONS':
        return ('', 204, CORS_PREFLIGHT_HEADERS)

    headers = {'Access-Control-Allow-Origin': '*'}

    try:
        request_json = request.get_json(silent=True) or {}

        title = request_json.get('title')
        if not title:
            return (json.dumps({'error': 'Title is required'}), 400, headers)

        analysis = analyze_content(title, request_json.get('description'), request_json.get('url'))
        return (json.dumps(analysis), 200, headers)

    except Exception as e:
        print(f"AI analysis error: {str(e)}\n{traceback.format_exc()}")
        return (json.dumps({'error': 'Failed to analyze content'}), 500, headers)


@functions_framework.http
def smart_suggestions(request):
    """
    Expected JSON input:
    {
        "items": [{"title": "...", "category": "AUTOMATION", "tags": ["n8n"]}]
    }
    """
    if request.method == 'OPTIONS':
        return ('', 204, CORS_PREFLIGHT_HEADERS)

    headers = {'Access-Control-Allow-Origin': '*'}

    try:
        request_json = request.get_json(silent=True) or {}

        items = request_json.get('items')
        if not isinstance(items, list):
            return (json.dumps({'error': 'items must be a list'}), 400, headers)

        suggestions = generate_smart_suggestions([item for item in items if isinstance(item, dict)])
        return (json.dumps(suggestions), 200, headers)

    except Exception as e:
        print(f"Smart suggestions error: {str(e)}\n{traceback.format_exc()}")
        return (json.dumps({'error': 'Failed to generate suggestions'}), 500, headers)
