"""
Error types for the Web Content Analyzer.

Each error carries the HTTP status the request handler maps it to.
Malformed model output is NOT an error: the analysis client degrades to a
fixed fallback result instead of raising.
"""

from typing import Optional


class AnalyzerError(Exception):
    """Base class for errors surfaced to the HTTP caller."""

    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(AnalyzerError):
    """Missing or invalid request input."""

    status_code = 400


class ExtractionInsufficientError(AnalyzerError):
    """Page yielded too little readable text to analyze."""

    status_code = 400


class FetchError(AnalyzerError):
    """Target page unreachable or answered with a non-success status."""

    def __init__(self, message: str, upstream_status: Optional[int] = None,
                 cause: Optional[BaseException] = None):
        super().__init__(message)
        self.upstream_status = upstream_status
        self.cause = cause


class AnalysisApiError(AnalyzerError):
    """The Gemini call itself failed (network, auth, quota, blocked)."""
