"""Content enrichment pipeline for the Explore Tracker."""

from .html_utils import decode_entities

from .platform_utils import (
    DEFAULT_PLATFORM,
    PLATFORM_NAMES,
    detect_platform,
    is_instagram_url,
    parse_instagram_shortcode,
    parse_instagram_username,
    platform_fields,
)

from .metadata_utils import (
    DEGRADED_MARKER,
    extract_metadata_from_html,
)

from .insight_utils import extract_insights

from .category_utils import (
    CATEGORIES,
    CATEGORY_NAMES,
    DEFAULT_CATEGORY,
    categorize_content,
    get_category_description,
)

from .ai_utils import (
    FALLBACK_ANALYSIS,
    analyze_content,
    clean_json_response,
    generate_smart_suggestions,
    run_analysis,
)

from .ytdlp_utils import (
    fetch_tool_metadata,
    is_tool_supported_url,
    tool_result_to_extracted,
)

from .suggestion_utils import build_suggested_record

__all__ = [
    # Entity decoding
    'decode_entities',
    # Platform detection
    'DEFAULT_PLATFORM',
    'PLATFORM_NAMES',
    'detect_platform',
    'is_instagram_url',
    'parse_instagram_shortcode',
    'parse_instagram_username',
    'platform_fields',
    # Metadata extraction
    'DEGRADED_MARKER',
    'extract_metadata_from_html',
    # Insights
    'extract_insights',
    # Categorization
    'CATEGORIES',
    'CATEGORY_NAMES',
    'DEFAULT_CATEGORY',
    'categorize_content',
    'get_category_description',
    # AI enrichment
    'FALLBACK_ANALYSIS',
    'analyze_content',
    'clean_json_response',
    'generate_smart_suggestions',
    'run_analysis',
    # yt-dlp
    'fetch_tool_metadata',
    'is_tool_supported_url',
    'tool_result_to_extracted',
    # Suggested record
    'build_suggested_record',
]
