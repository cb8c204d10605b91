"""Web Content Analyzer: fetch a page, extract its text, analyze it with Gemini."""

from .analysis import (
    AnalysisClient,
    fallback_analysis,
    parse_analysis_response,
)

from .config import Settings, configure_logging, load_settings

from .errors import (
    AnalyzerError,
    ValidationError,
    FetchError,
    ExtractionInsufficientError,
    AnalysisApiError,
)

from .extraction import (
    MAX_CONTENT_LENGTH,
    CONTENT_RULES,
    extract_main_content,
    normalize_whitespace,
)

from .fetcher import BROWSER_HEADERS, fetch_webpage

from .handler import (
    PageAnalyzer,
    handle_analyze,
    handle_health,
    json_response,
    preflight_response,
)

from .metadata import PageMetadata, extract_page_metadata

from .prompts import build_analysis_prompt

__all__ = [
    # Analysis
    'AnalysisClient',
    'fallback_analysis',
    'parse_analysis_response',
    # Configuration
    'Settings',
    'configure_logging',
    'load_settings',
    # Errors
    'AnalyzerError',
    'ValidationError',
    'FetchError',
    'ExtractionInsufficientError',
    'AnalysisApiError',
    # Extraction
    'MAX_CONTENT_LENGTH',
    'CONTENT_RULES',
    'extract_main_content',
    'normalize_whitespace',
    # Fetching
    'BROWSER_HEADERS',
    'fetch_webpage',
    # Handlers
    'PageAnalyzer',
    'handle_analyze',
    'handle_health',
    'json_response',
    'preflight_response',
    # Metadata
    'PageMetadata',
    'extract_page_metadata',
    # Prompts
    'build_analysis_prompt',
]
