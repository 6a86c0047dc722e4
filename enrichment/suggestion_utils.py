"""
Merge pipeline output into a suggested record for the item store.
"""

import re
from typing import Dict, List, Optional

from .category_utils import DEFAULT_CATEGORY

DEFAULT_STATUS = 'PLANNED'
MAX_TOOL_TAGS = 2

SCHEME_RE = re.compile(r'https?://', re.I)


def tool_domain(tool: str) -> str:
    """'https://n8n.io/workflows' -> 'n8n.io'"""
    return SCHEME_RE.sub('', tool, count=1).split('/')[0]


def tool_label(tool: str) -> str:
    """'https://n8n.io/workflows' -> 'n8n'"""
    return tool_domain(tool).split('.')[0]


def _same_url(a: str, b: str) -> bool:
    return a.lower().rstrip('/') == b.lower().rstrip('/')


def merge_tags(ai_tags: List[str], mentioned_tools: List[str], platform: Optional[str],
               content_type: Optional[str]) -> List[str]:
    """AI tags, then up to two tool labels, platform and content type; unique, in order."""
    candidates = list(ai_tags or [])
    candidates.extend(tool_label(tool) for tool in (mentioned_tools or [])[:MAX_TOOL_TAGS])
    candidates.append(platform.lower() if platform else None)
    candidates.append(content_type.lower() if content_type else None)
    return list(dict.fromkeys(tag for tag in candidates if tag))


def build_links(url: str, mentioned_tools: List[str]) -> List[Dict]:
    """One link per mentioned tool, skipping the item's own URL."""
    return [
        {'url': tool, 'label': tool_domain(tool)}
        for tool in (mentioned_tools or [])
        if not _same_url(tool, url)
    ]


def build_suggested_record(url: str, extracted: Dict, insights: Dict, categorization: Dict,
                           ai_analysis: Optional[Dict], ai_succeeded: bool = True) -> Dict:
    """
    Build the pre-filled record offered to the user before saving.

    The AI category beats the keyword-scored one and the AI summary fills a
    missing title or description, but only when the AI call produced a real
    analysis (ai_succeeded) rather than the fallback.

    Returns:
        Dict with title, description, category, tags, primary_url, links,
        status and notes
    """
    ai_analysis = ai_analysis or {}
    ai_summary = ai_analysis.get('summary') if ai_succeeded else None
    ai_category = ai_analysis.get('category') if ai_succeeded else None

    return {
        'title': extracted.get('title') or ai_summary or 'Untitled',
        'description': extracted.get('description') or ai_summary,
        'category': ai_category or categorization.get('category') or DEFAULT_CATEGORY,
        'tags': merge_tags(
            ai_analysis.get('tags'),
            insights.get('mentioned_tools'),
            extracted.get('platform'),
            extracted.get('content_type'),
        ),
        'primary_url': url,
        'links': build_links(url, insights.get('mentioned_tools')),
        'status': DEFAULT_STATUS,
        'notes': '\n'.join(insights.get('key_points') or []),
    }
