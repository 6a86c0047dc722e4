"""
Heuristic insight mining from free text.

Works on the combined title + description of a saved item and pulls out:
- mentioned tools and URLs
- key sentences worth keeping as notes
- calls to action / imperative sentences
- a coarse main topic
"""

import re
from typing import Dict, List

# Tool mentions, grouped by kind. All matches are lower-cased.
TOOL_PATTERNS = [
    re.compile(r'\b(?:n8n|zapier|make|ifttt|integromat)\b', re.I),           # automation
    re.compile(r'\b(?:linkedin|indeed|gmail|notion|slack|github|docker)\b', re.I),  # productivity / dev
    re.compile(r'\b(?:openai|chatgpt|claude|gemini|copilot)\b', re.I),       # AI
    re.compile(r'(?:https?://\S+|www\.\S+)', re.I),                          # raw URLs
]

KEY_POINT_KEYWORDS = [
    'automat', 'no code', 'zero coding', 'productivity', 'efficiency',
    'job hunt', 'job search', 'application', 'workflow', 'integration',
    'tip', 'hack', 'tool', 'website', 'app', 'service', 'feature',
    'how to', 'use', 'create', 'build', 'repo', 'repository', 'open source',
]

ACTION_PATTERNS = [
    re.compile(r"comment\s+\w+\s+and\s+i['’]?ll", re.I),
    re.compile(r'drop\s+a?\s+\w+\s+below', re.I),
    re.compile(r'dm\s+me\s+for', re.I),
    re.compile(r'click\s+the\s+link', re.I),
    re.compile(r'check\s+out', re.I),
    re.compile(r'try\s+\w+', re.I),
    re.compile(r'download\s+\w+', re.I),
    re.compile(r'get\s+started', re.I),
]

# Sentences starting with one of these (plain prefix match, so "users" counts as "use")
ACTION_VERBS = ('try', 'use', 'check', 'visit', 'download', 'install', 'create', 'build', 'make', 'automate')

# (topic, patterns) - every pattern must match the lower-cased text; first rule wins
TOPIC_RULES = [
    ('Workflow Automation', [r'n8n|automation|workflow']),
    ('Job Search Automation', [r'job', r'hunt|search|application']),
    ('AI Tools', [r'ai|gpt|llm']),
    ('Local SEO / Google Business', [r'google', r'business']),
    ('Web Tools', [r'web']),
    ('Productivity Tools', [r'productivity|efficiency']),
]

SENTENCE_SPLIT_RE = re.compile(r'[.!?]+')
MIN_SENTENCE_LENGTH = 10
MIN_KEY_POINT_LENGTH = 15


def _unique(items: List[str]) -> List[str]:
    """De-duplicate preserving first-seen order."""
    return list(dict.fromkeys(items))


def split_sentences(content: str) -> List[str]:
    """Split on . ! ? and drop fragments of 10 characters or fewer."""
    return [
        sentence for sentence in SENTENCE_SPLIT_RE.split(content or '')
        if len(sentence.strip()) > MIN_SENTENCE_LENGTH
    ]


def extract_mentioned_tools(content: str) -> List[str]:
    """Find named tools and raw URLs, lower-cased and de-duplicated."""
    tools = []
    for pattern in TOOL_PATTERNS:
        tools.extend(match.group(0).lower() for match in pattern.finditer(content or ''))
    return _unique(tools)


def extract_key_points(sentences: List[str]) -> List[str]:
    """Keep sentences that mention a keyword and are long enough to stand alone."""
    key_points = []
    for sentence in sentences:
        lower = sentence.lower()
        if not any(keyword in lower for keyword in KEY_POINT_KEYWORDS):
            continue
        cleaned = ' '.join(sentence.split())
        if len(cleaned) > MIN_KEY_POINT_LENGTH:
            key_points.append(cleaned)
    return key_points


def extract_action_items(content: str, sentences: List[str]) -> List[str]:
    """Calls to action plus sentences opening with an imperative verb."""
    actions = []
    for pattern in ACTION_PATTERNS:
        actions.extend(match.group(0) for match in pattern.finditer(content or ''))

    for sentence in sentences:
        stripped = sentence.strip()
        if stripped.lower().startswith(ACTION_VERBS):
            actions.append(stripped)

    return _unique(actions)


def infer_main_topic(content: str):
    """Return the first topic whose rule matches, or None."""
    lower = (content or '').lower()
    for topic, patterns in TOPIC_RULES:
        if all(re.search(pattern, lower) for pattern in patterns):
            return topic
    return None


def extract_insights(content: str) -> Dict:
    """
    Mine insights from free text (usually title + description).

    Returns:
        Dict with:
            key_points: list - sentences worth keeping as notes, in order
            mentioned_tools: list - unique lower-cased tool names / URLs
            action_items: list - unique calls to action
            main_topic: str - only present when a topic rule matched
    """
    sentences = split_sentences(content)

    insights = {
        'key_points': extract_key_points(sentences),
        'mentioned_tools': extract_mentioned_tools(content),
        'action_items': extract_action_items(content, sentences),
    }

    main_topic = infer_main_topic(content)
    if main_topic:
        insights['main_topic'] = main_topic

    return insights
