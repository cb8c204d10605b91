"""
Shared pytest fixtures for Web Content Analyzer tests.
"""

import pytest

from content_analyzer import fallback_analysis


LONG_PARAGRAPH = (
    "Python's standard library ships a surprising amount of functionality. "
    "This article walks through the modules most developers overlook, "
    "explains where each one fits, and shows small examples you can adapt. "
) * 6


# ============================================================================
# Request / client fakes
# ============================================================================

@pytest.fixture
def mock_flask_request():
    """Factory for creating mock Flask request objects."""
    class MockRequest:
        def __init__(self, json_data=None, method='POST', path='/analyze'):
            self._json = json_data
            self.method = method
            self.path = path
            self.data = b''

        def get_json(self, force=False, silent=False):
            return self._json

    return MockRequest


class FakeAnalysisClient:
    """Records prompts and returns a canned analysis or raises."""

    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.prompts = []

    def analyze(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return dict(self.result) if self.result is not None else fallback_analysis('')


@pytest.fixture
def fake_analysis_client():
    """Factory for FakeAnalysisClient instances."""
    return FakeAnalysisClient


@pytest.fixture
def model_analysis():
    """A well-formed analysis as the model would return it."""
    return {
        'themes': ['Python', 'Standard library'],
        'sentiment': {'overall': 'positive', 'tone': 'educational', 'confidence': 'high'},
        'summary': 'An overview of overlooked standard library modules.',
        'keyInsights': ['pathlib replaces most os.path usage'],
        'intentions': ['Teach'],
        'targetAudience': 'Intermediate Python developers',
        'contentType': 'blog post',
        'expertise': 'Practitioner',
        'actionablePoints': ['Try functools.cache'],
    }


# ============================================================================
# Sample HTML
# ============================================================================

@pytest.fixture
def long_paragraph():
    return LONG_PARAGRAPH


@pytest.fixture
def sample_article_html():
    """A page with boilerplate around a long <article>."""
    return f"""
    <!DOCTYPE html>
    <html>
    <head>
        <title>Hidden Gems of the Standard Library</title>
        <meta name="description" content="Modules you should know">
        <meta name="keywords" content="python, stdlib">
        <script>var tracking = "should never appear";</script>
    </head>
    <body>
        <header><nav>Home | Blog | About</nav></header>
        <div class="sidebar">Related posts</div>
        <article>
            <h1>Hidden Gems</h1>
            <p>{LONG_PARAGRAPH}</p>
            <div class="social-share">Share on social</div>
        </article>
        <footer>Copyright 2024</footer>
    </body>
    </html>
    """


@pytest.fixture
def short_page_html():
    """A page whose total readable text is 50 characters."""
    return "<html><body><p>" + ("x" * 50) + "</p></body></html>"
