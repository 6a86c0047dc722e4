"""
AI enrichment for saved items.

Builds a prompt from whatever is known about an item, asks Gemini for a JSON
analysis, strips markdown fences from the reply and validates it. Any failure
(missing key, network error, empty or malformed reply) yields FALLBACK_ANALYSIS,
which has exactly the same shape as a real analysis.
"""

import json
import os
from typing import Dict, List, Optional

import google.generativeai as genai

from .config_utils import env_number
from .category_utils import CATEGORY_NAMES, DEFAULT_CATEGORY, normalize_category
from .platform_utils import is_instagram_url

# Configuration
GEMINI_API_KEY = os.environ.get('GEMINI_API_KEY')
GEMINI_MODEL = os.environ.get('GEMINI_MODEL', 'gemini-2.0-flash')
AI_TEMPERATURE = env_number('AI_TEMPERATURE', 0.7, float)
AI_MAX_OUTPUT_TOKENS = env_number('AI_MAX_OUTPUT_TOKENS', 500, int)

PRIORITIES = ('low', 'medium', 'high')

FALLBACK_ANALYSIS = {
    'category': DEFAULT_CATEGORY,
    'tags': [],
    'summary': 'Unable to analyze content',
    'actionableInsights': [],
    'priority': 'medium',
}

# Prefix of the synthesized Instagram description
LIMITED_INFO_MARKER = 'Note: Full content details require'

LIMITED_INSTAGRAM_PROMPT = """This is an Instagram {title} but full content details are not available.
URL: {url}

Based on the limited information available, provide a JSON response with:
1. category: Most likely MARKETING or OTHER
2. tags: Array of 3-5 relevant tags (lowercase, single words) - focus on "instagram", "socialmedia", etc.
3. summary: Note that this is Instagram content requiring direct access for full details
4. actionableInsights: Suggest visiting Instagram directly to view the content
5. priority: "low" since we can't determine the actual content value

Respond only with valid JSON."""

ANALYSIS_PROMPT = """Analyze this exploration item and provide structured insights:

Title: {title}
Description: {description}
URL: {url}

Provide a JSON response with:
1. category: One of {categories}
2. tags: Array of 3-5 relevant tags (lowercase, single words)
3. summary: A concise 1-2 sentence summary
4. actionableInsights: Array of 2-3 specific action items or learning points
5. priority: "low", "medium", or "high" based on potential impact

Respond only with valid JSON."""

SUGGESTIONS_PROMPT = """Based on these recent exploration items, identify patterns and suggest new areas to explore:

{items}

Provide a JSON response with:
1. trendingTopics: Array of 3-4 topics you're currently interested in
2. recommendations: Array of 3-4 specific things to explore next

Respond only with valid JSON."""


def complete(prompt: str, model: str = None, temperature: float = None,
             max_output_tokens: int = None) -> str:
    """
    Send a prompt to Gemini and return the raw reply text.

    Raises on a missing API key, transport errors or an empty reply; callers
    are expected to turn that into their fallback.
    """
    if not GEMINI_API_KEY:
        raise RuntimeError('GEMINI_API_KEY not configured')

    genai.configure(api_key=GEMINI_API_KEY)
    gemini = genai.GenerativeModel(model or GEMINI_MODEL)
    response = gemini.generate_content(
        prompt,
        generation_config=genai.GenerationConfig(
            temperature=AI_TEMPERATURE if temperature is None else temperature,
            max_output_tokens=max_output_tokens or AI_MAX_OUTPUT_TOKENS,
        ),
    )

    text = response.text
    if not text or not text.strip():
        raise ValueError('No response from AI')
    return text


def clean_json_response(content: str) -> str:
    """
    Strip a markdown code fence from around a JSON reply.

    Examples:
        >>> clean_json_response('```json\\n{"a": 1}\\n```')
        '{"a": 1}'
    """
    cleaned = (content or '').strip()

    if cleaned.startswith('```json'):
        cleaned = cleaned[len('```json'):]
    elif cleaned.startswith('```'):
        cleaned = cleaned[len('```'):]

    if cleaned.endswith('```'):
        cleaned = cleaned[:-len('```')]

    return cleaned.strip()


def _string_list(value) -> Optional[List[str]]:
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        return None
    return value


def validate_analysis(data) -> Dict:
    """
    Check a parsed reply against the AIAnalysis shape.

    Returns:
        The normalized analysis (category upper-cased, tags and priority
        lower-cased)

    Raises:
        ValueError: If any field is missing or has the wrong type
    """
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object, got {type(data).__name__}")

    category = normalize_category(data.get('category'))
    if category is None:
        raise ValueError(f"Unknown category: {data.get('category')!r}")

    tags = _string_list(data.get('tags'))
    if tags is None:
        raise ValueError('tags must be a list of strings')

    insights = _string_list(data.get('actionableInsights'))
    if insights is None:
        raise ValueError('actionableInsights must be a list of strings')

    summary = data.get('summary')
    if not isinstance(summary, str):
        raise ValueError('summary must be a string')

    priority = data.get('priority')
    if not isinstance(priority, str) or priority.lower() not in PRIORITIES:
        raise ValueError(f"Invalid priority: {priority!r}")

    return {
        'category': category,
        'tags': [tag.lower() for tag in tags],
        'summary': summary,
        'actionableInsights': insights,
        'priority': priority.lower(),
    }


def build_analysis_prompt(title: str, description: str = None, url: str = None) -> str:
    """Choose between the limited-visibility Instagram prompt and the full prompt."""
    limited_instagram = bool(url) and is_instagram_url(url) and (
        not description or LIMITED_INFO_MARKER in description
    )

    if limited_instagram:
        return LIMITED_INSTAGRAM_PROMPT.format(title=title, url=url)

    return ANALYSIS_PROMPT.format(
        title=title,
        description=description or 'Not provided',
        url=url or 'Not provided',
        categories=', '.join(CATEGORY_NAMES[:-1]) + f", or {CATEGORY_NAMES[-1]}",
    )


def run_analysis(title: str, description: str = None, url: str = None) -> Dict:
    """
    Run AI enrichment and report whether it actually succeeded.

    Returns:
        Dict with:
            analysis: dict - validated AIAnalysis, or a copy of FALLBACK_ANALYSIS
            success: bool - False when the fallback was used
            error: str - failure reason, None on success
    """
    try:
        prompt = build_analysis_prompt(title, description, url)
        content = complete(prompt)
        analysis = validate_analysis(json.loads(clean_json_response(content)))
        return {'analysis': analysis, 'success': True, 'error': None}
    except Exception as e:
        print(f"AI Analysis failed: {e}")
        return {
            'analysis': {**FALLBACK_ANALYSIS, 'tags': [], 'actionableInsights': []},
            'success': False,
            'error': str(e),
        }


def analyze_content(title: str, description: str = None, url: str = None) -> Dict:
    """Return an AIAnalysis for an item. Never raises."""
    return run_analysis(title, description, url)['analysis']


def generate_smart_suggestions(recent_items: List[Dict]) -> Dict:
    """
    Suggest trending topics and next explorations from recent items.

    Args:
        recent_items: Dicts with title, category and tags

    Returns:
        Dict with trendingTopics and recommendations (both empty on failure)
    """
    try:
        lines = '\n'.join(
            f"- {item.get('title', '')} ({item.get('category', DEFAULT_CATEGORY)}): "
            f"{', '.join(item.get('tags') or [])}"
            for item in recent_items
        )
        content = complete(SUGGESTIONS_PROMPT.format(items=lines), temperature=0.8, max_output_tokens=300)
        data = json.loads(clean_json_response(content))

        topics = _string_list(data.get('trendingTopics')) if isinstance(data, dict) else None
        recommendations = _string_list(data.get('recommendations')) if isinstance(data, dict) else None
        if topics is None or recommendations is None:
            raise ValueError('Malformed suggestions response')

        return {'trendingTopics': topics, 'recommendations': recommendations}
    except Exception as e:
        print(f"Smart suggestions failed: {e}")
        return {'trendingTopics': [], 'recommendations': []}
