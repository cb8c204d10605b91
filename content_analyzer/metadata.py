"""
Page metadata extraction (title, description, keywords).

Each field walks a fallback chain and ends in a fixed placeholder, so every
field is always a non-empty string.
"""

from dataclasses import dataclass
from typing import Optional

from bs4 import BeautifulSoup

NO_TITLE = 'No title found'
NO_DESCRIPTION = 'No description found'
NO_KEYWORDS = 'No keywords found'


@dataclass(frozen=True)
class PageMetadata:
    title: str = NO_TITLE
    description: str = NO_DESCRIPTION
    keywords: str = NO_KEYWORDS


def _tag_text(soup: BeautifulSoup, name: str) -> Optional[str]:
    tag = soup.find(name)
    return tag.get_text(strip=True) if tag else None


def _meta_content(soup: BeautifulSoup, **attrs) -> Optional[str]:
    tag = soup.find('meta', attrs=attrs)
    if tag and tag.get('content'):
        return tag['content'].strip() or None
    return None


def extract_page_metadata(html: str) -> PageMetadata:
    """Extract title, description and keywords from raw HTML."""
    soup = BeautifulSoup(html or '', 'html.parser')

    title = (
        _tag_text(soup, 'title') or
        _tag_text(soup, 'h1') or
        NO_TITLE
    )

    description = (
        _meta_content(soup, name='description') or
        _meta_content(soup, property='og:description') or
        NO_DESCRIPTION
    )

    keywords = _meta_content(soup, name='keywords') or NO_KEYWORDS

    return PageMetadata(title=title, description=description, keywords=keywords)
