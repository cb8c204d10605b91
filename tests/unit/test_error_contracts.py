"""
Error Contract Tests - Defines how each failure reaches the caller.

These tests serve as guardrails to ensure consistent error handling.

Error Classification:
====================

CLIENT ERRORS (HTTP 400, body {"error": <message>}):
- Missing url field, empty url, non-object body
- Non-string url
- Page text shorter than the 100 character floor

ANALYSIS FAILURES (HTTP 500, body {"error": "Failed to analyze URL", "details": <message>}):
- Page fetch failed (timeout, connection error, HTTP 4xx/5xx)
- Gemini call failed (network, auth, quota, missing key)
- Any unexpected exception

NOT AN ERROR (HTTP 200):
- Model reply without valid JSON (fixed fallback analysis is returned)
"""

import json

import pytest

from content_analyzer.errors import (
    AnalysisApiError,
    AnalyzerError,
    ExtractionInsufficientError,
    FetchError,
    ValidationError,
)
from content_analyzer.handler import handle_analyze


class RaisingAnalyzer:
    """PageAnalyzer stand-in that raises a preset error."""

    def __init__(self, error):
        self.error = error
        self.calls = []

    def analyze(self, url):
        self.calls.append(url)
        raise self.error


class TestErrorStatusCodes:
    """Each error type carries the status it maps to."""

    def test_validation_error_is_400(self):
        assert ValidationError('x').status_code == 400

    def test_extraction_error_is_400(self):
        assert ExtractionInsufficientError('x').status_code == 400

    def test_fetch_error_is_500(self):
        error = FetchError('HTTP error! status: 404', upstream_status=404)
        assert error.status_code == 500
        assert error.upstream_status == 404

    def test_analysis_api_error_is_500(self):
        assert AnalysisApiError('x').status_code == 500

    def test_all_share_base(self):
        for error_type in (ValidationError, ExtractionInsufficientError, FetchError, AnalysisApiError):
            assert issubclass(error_type, AnalyzerError)

    def test_status_override(self):
        assert AnalyzerError('x', status_code=418).status_code == 418


class TestClientErrors:
    """Invalid input is rejected before any fetch happens."""

    @pytest.mark.parametrize('payload', [{}, None, [], {'url': ''}, {'url': None}, 'https://example.com'])
    def test_missing_url_is_400(self, mock_flask_request, payload):
        analyzer = RaisingAnalyzer(AssertionError('should not be called'))
        body, status, headers = handle_analyze(mock_flask_request(json_data=payload), analyzer)

        assert status == 400
        assert json.loads(body) == {'error': 'URL is required'}
        assert analyzer.calls == []

    def test_non_string_url_is_400(self, mock_flask_request):
        analyzer = RaisingAnalyzer(AssertionError('should not be called'))
        body, status, _ = handle_analyze(mock_flask_request(json_data={'url': 42}), analyzer)

        assert status == 400
        assert json.loads(body) == {'error': 'URL must be a string'}

    def test_insufficient_content_is_400(self, mock_flask_request):
        analyzer = RaisingAnalyzer(
            ExtractionInsufficientError('Unable to extract meaningful content from the URL')
        )
        body, status, _ = handle_analyze(mock_flask_request(json_data={'url': 'https://example.com'}), analyzer)

        assert status == 400
        assert json.loads(body) == {'error': 'Unable to extract meaningful content from the URL'}


class TestAnalysisFailures:
    """Upstream failures share one 500 response shape."""

    @pytest.mark.parametrize('error, details', [
        (FetchError('HTTP error! status: 503', upstream_status=503), 'HTTP error! status: 503'),
        (FetchError('Request timed out'), 'Request timed out'),
        (AnalysisApiError('GEMINI_API_KEY not configured'), 'GEMINI_API_KEY not configured'),
        (RuntimeError('boom'), 'boom'),
    ])
    def test_failure_shape(self, mock_flask_request, error, details):
        analyzer = RaisingAnalyzer(error)
        body, status, headers = handle_analyze(mock_flask_request(json_data={'url': 'https://example.com'}), analyzer)

        assert status == 500
        assert json.loads(body) == {'error': 'Failed to analyze URL', 'details': details}

    def test_no_traceback_in_response(self, mock_flask_request):
        analyzer = RaisingAnalyzer(KeyError('missing'))
        body, status, _ = handle_analyze(mock_flask_request(json_data={'url': 'https://example.com'}), analyzer)

        assert status == 500
        assert 'Traceback' not in body

    def test_error_responses_are_json_with_cors(self, mock_flask_request):
        analyzer = RaisingAnalyzer(FetchError('Request failed: refused'))
        _, _, headers = handle_analyze(mock_flask_request(json_data={'url': 'https://example.com'}), analyzer)

        assert headers['Content-Type'] == 'application/json'
        assert headers['Access-Control-Allow-Origin'] == '*'
