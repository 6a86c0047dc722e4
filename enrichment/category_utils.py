"""
Keyword-weighted categorization for the exploration taxonomy.

Each category in CATEGORY_KEYWORDS scores one point per keyword found in the
text (substring match, each keyword counted once). The best score wins,
ties going to the earlier category, and confidence saturates at three hits.
"""

from typing import Dict

DEFAULT_CATEGORY = 'OTHER'
NO_SIGNAL_CONFIDENCE = 0.5
SATURATION_HITS = 3

# Full taxonomy with descriptions (order matters for prompts and seeding)
CATEGORIES = {
    'AI_AGENTS': 'AI agents, LLMs, chatbots, and intelligent systems',
    'RASPBERRY_PI': 'Raspberry Pi projects and hardware',
    'PRINTER_3D': '3D printing, models, and fabrication',
    'ELECTRONICS': 'Electronics projects, Arduino, sensors',
    'SOFTWARE': 'Software development, libraries, frameworks',
    'AUTOMATION': 'Workflow automation, no-code tools, integrations',
    'WEB_TOOLS': 'Web applications, online tools, and services',
    'PRODUCTIVITY': 'Productivity tools, time management, organization',
    'MARKETING': 'Marketing, social media, growth strategies',
    'OTHER': 'Miscellaneous and uncategorized items',
}

CATEGORY_NAMES = list(CATEGORIES)

# Scoring table, iterated in declared order
CATEGORY_KEYWORDS = [
    ('AI_AGENTS', ['ai', 'artificial intelligence', 'gpt', 'chatgpt', 'llm', 'machine learning',
                   'neural', 'openai', 'claude', 'gemini', 'copilot']),
    ('RASPBERRY_PI', ['raspberry pi', 'gpio', 'sensor', 'arduino', 'microcontroller', 'iot', 'embedded']),
    ('PRINTER_3D', ['3d print', '3d printer', 'filament', 'pla', 'abs', 'stl', 'cad', 'fusion 360', 'prusa']),
    ('SOFTWARE', ['github', 'repository', 'repo', 'open source', 'code', 'programming', 'developer',
                  'software', 'library', 'framework']),
    ('AUTOMATION', ['automation', 'n8n', 'zapier', 'make', 'integromat', 'workflow', 'no code',
                    'low code', 'integration', 'api', 'webhook', 'job automation']),
    ('WEB_TOOLS', ['website', 'web app', 'online tool', 'saas', 'browser', 'chrome extension', 'web service']),
    ('PRODUCTIVITY', ['productivity', 'notion', 'efficiency', 'time management', 'task', 'organize',
                      'slack', 'email']),
    ('MARKETING', ['seo', 'marketing', 'google business', 'social media', 'growth', 'traffic',
                   'conversion', 'linkedin', 'indeed']),
]


def get_category_description(category: str) -> str:
    """Get the human description for a category name."""
    return CATEGORIES.get(category, f"Category: {category}")


def normalize_category(category) -> str:
    """Upper-case a category name; returns None if it is not in the taxonomy."""
    if not isinstance(category, str):
        return None
    normalized = category.strip().upper().replace(' ', '_')
    return normalized if normalized in CATEGORIES else None


def score_categories(text: str) -> Dict[str, int]:
    """Count distinct keyword hits per category (declared order preserved)."""
    lower = (text or '').lower()
    return {
        name: sum(1 for keyword in keywords if keyword in lower)
        for name, keywords in CATEGORY_KEYWORDS
    }


def categorize_content(text: str) -> Dict:
    """
    Pick the best-matching category for a piece of text.

    Returns:
        Dict with:
            category: str - one of CATEGORY_NAMES
            confidence: float - in [0, 1]; 0.5 when nothing matched

    Examples:
        >>> categorize_content('A new raspberry pi hat')
        {'category': 'RASPBERRY_PI', 'confidence': 0.3333333333333333}
    """
    scores = score_categories(text)

    # sorted() is stable, so equal scores keep table order
    ranked = sorted(scores.items(), key=lambda item: -item[1])
    best_category, best_score = ranked[0]

    if best_score == 0:
        return {'category': DEFAULT_CATEGORY, 'confidence': NO_SIGNAL_CONFIDENCE}

    return {
        'category': best_category,
        'confidence': min(best_score / SATURATION_HITS, 1.0),
    }
