"""
Main-content extraction.

Strips boilerplate from an HTML page, then walks an ordered table of
selector rules to find the region holding the readable text. The first rule
whose element satisfies its predicate wins; later rules are never consulted.

Fallback chain when no rule matches:
1. All headings (h1-h6) followed by all paragraphs, in document order
2. The full body text
"""

import re
from typing import Callable, List, Optional, Tuple

from bs4 import BeautifulSoup, Tag

MAX_CONTENT_LENGTH = 10000
TRUNCATION_MARKER = '...'
MIN_SELECTOR_TEXT_LENGTH = 500

BOILERPLATE_SELECTOR = 'script, style, nav, header, footer, .sidebar, .advertisement, .ads, .social-share'


def _has_substantial_text(text: str) -> bool:
    return len(text) > MIN_SELECTOR_TEXT_LENGTH


# Semantic containers first, then class/id conventions. Order is priority.
CONTENT_RULES: List[Tuple[str, Callable[[str], bool]]] = [
    ('article', _has_substantial_text),
    ('main', _has_substantial_text),
    ('[role="main"]', _has_substantial_text),
    ('.content', _has_substantial_text),
    ('.post-content', _has_substantial_text),
    ('.article-content', _has_substantial_text),
    ('.entry-content', _has_substantial_text),
    ('#content', _has_substantial_text),
    ('.main-content', _has_substantial_text),
]

_WHITESPACE_RE = re.compile(r'\s+')


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs (newlines included) to single spaces and trim."""
    return _WHITESPACE_RE.sub(' ', text).strip()


def truncate_content(text: str, max_length: int = MAX_CONTENT_LENGTH) -> str:
    """Cap text at max_length, appending the truncation marker when cut."""
    if len(text) > max_length:
        return text[:max_length] + TRUNCATION_MARKER
    return text


def remove_boilerplate(soup: BeautifulSoup) -> None:
    """Drop scripts, navigation, ads and similar non-content elements in place."""
    for element in soup.select(BOILERPLATE_SELECTOR):
        # Descendants of an already removed match are decomposed with it
        if not element.decomposed:
            element.decompose()


def _select_main_region(soup: BeautifulSoup) -> Optional[str]:
    for selector, predicate in CONTENT_RULES:
        element = soup.select_one(selector)
        if element is None:
            continue
        text = element.get_text().strip()
        if predicate(text):
            return text
    return None


def _texts(soup: BeautifulSoup, selector: str) -> List[str]:
    return [element.get_text().strip() for element in soup.select(selector)]


def _headings_and_paragraphs(soup: BeautifulSoup) -> str:
    headings = ' '.join(_texts(soup, 'h1, h2, h3, h4, h5, h6'))
    paragraphs = ' '.join(_texts(soup, 'p'))
    return f'{headings} {paragraphs}'.strip()


def _body_text(soup: BeautifulSoup) -> str:
    body: Optional[Tag] = soup.body
    root = body if body is not None else soup
    return root.get_text().strip()


def extract_main_content(html: str) -> str:
    """
    Extract the main readable text from an HTML page.

    Args:
        html: Raw HTML

    Returns:
        Whitespace-normalized text, at most MAX_CONTENT_LENGTH characters plus
        the truncation marker. May be empty.
    """
    soup = BeautifulSoup(html or '', 'html.parser')
    remove_boilerplate(soup)

    content = (
        _select_main_region(soup) or
        _headings_and_paragraphs(soup) or
        _body_text(soup)
    )

    return truncate_content(normalize_whitespace(content))
