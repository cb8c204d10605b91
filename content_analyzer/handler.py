"""
Request handling for the Web Content Analyzer.

Flow for POST /analyze:
1. Validate the request body has a url
2. Fetch the page
3. Extract main content and metadata
4. Reject pages with less than MIN_CONTENT_LENGTH characters of text
5. Build the prompt and run the Gemini analysis
6. Attach request metadata to the result

Handlers return (body, status, headers) tuples, the shape Cloud Functions
and Flask accept directly.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple

from .analysis import AnalysisClient
from .errors import AnalyzerError, ExtractionInsufficientError, ValidationError
from .extraction import extract_main_content
from .fetcher import DEFAULT_TIMEOUT, fetch_webpage
from .metadata import extract_page_metadata
from .prompts import build_analysis_prompt

logger = logging.getLogger(__name__)

MIN_CONTENT_LENGTH = 100

CORS_HEADERS = {'Access-Control-Allow-Origin': '*'}

PREFLIGHT_HEADERS = {
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Methods': 'GET, POST, OPTIONS',
    'Access-Control-Allow-Headers': 'Content-Type',
    'Access-Control-Max-Age': '3600',
}

Response = Tuple[str, int, Dict[str, str]]


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and a Z suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def json_response(body: Dict[str, Any], status: int = 200) -> Response:
    headers = dict(CORS_HEADERS)
    headers['Content-Type'] = 'application/json'
    return (json.dumps(body), status, headers)


def preflight_response() -> Response:
    return ('', 204, dict(PREFLIGHT_HEADERS))


class PageAnalyzer:
    """
    Orchestrates fetch, extraction, prompting and analysis for one URL.

    Built once at startup; holds only configuration and the shared
    analysis client.
    """

    def __init__(self, analysis_client: AnalysisClient, fetch_timeout: float = DEFAULT_TIMEOUT):
        self.analysis_client = analysis_client
        self.fetch_timeout = fetch_timeout

    def analyze(self, url: str) -> Dict[str, Any]:
        """
        Produce the AnalysisResult for a URL.

        Raises:
            FetchError: page could not be fetched
            ExtractionInsufficientError: page has too little text
            AnalysisApiError: the Gemini call failed
        """
        logger.info("Analyzing URL: %s", url)

        html = fetch_webpage(url, timeout=self.fetch_timeout)

        content = extract_main_content(html)
        metadata = extract_page_metadata(html)

        if not content or len(content) < MIN_CONTENT_LENGTH:
            raise ExtractionInsufficientError('Unable to extract meaningful content from the URL')

        logger.info("Extracted %d characters of content", len(content))

        prompt = build_analysis_prompt(url, metadata, content)
        analysis = self.analysis_client.analyze(prompt)

        analysis['metadata'] = {
            'url': url,
            'title': metadata.title,
            'description': metadata.description,
            'contentLength': len(content),
            'analyzedAt': utc_timestamp(),
        }
        return analysis


def _require_url(payload: Optional[Any]) -> str:
    if not isinstance(payload, dict) or not payload.get('url'):
        raise ValidationError('URL is required')
    url = payload['url']
    if not isinstance(url, str):
        raise ValidationError('URL must be a string')
    return url


def _failure_response(details: str) -> Response:
    return json_response({'error': 'Failed to analyze URL', 'details': details}, 500)


def handle_analyze(request, analyzer: PageAnalyzer) -> Response:
    """
    Handle POST /analyze.

    Expected JSON input:
    {
        "url": "https://example.com/article"
    }
    """
    try:
        url = _require_url(request.get_json(silent=True))
    except ValidationError as e:
        logger.warning("Rejected analyze request: %s", e.message)
        return json_response({'error': e.message}, e.status_code)

    try:
        analysis = analyzer.analyze(url)
    except AnalyzerError as e:
        if e.status_code < 500:
            logger.warning("Analysis of %s rejected: %s", url, e.message)
            return json_response({'error': e.message}, e.status_code)
        logger.error("Analysis error for %s: %s", url, e.message)
        return _failure_response(e.message)
    except Exception as e:
        logger.exception("Unexpected analysis error for %s", url)
        return _failure_response(str(e))

    return json_response({'success': True, 'analysis': analysis})


def handle_health() -> Response:
    """Handle GET /health."""
    return json_response({'status': 'Server is running', 'timestamp': utc_timestamp()})
