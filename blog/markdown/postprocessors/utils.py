"""Shared BeautifulSoup tree for postprocessors that edit code blocks."""

from __future__ import annotations

from bs4 import BeautifulSoup

_SOUP_KEY = "__shared_soup"
_SOUP_HTML_KEY = "__shared_soup_html"


def get_shared_soup(html: str, context: dict) -> BeautifulSoup:
    """Return a parsed tree for ``html``, reusing the one stored in ``context``.

    The stored tree is only valid for the exact HTML string it was last
    serialised to; anything else is parsed afresh and replaces it.
    """
    if context.get(_SOUP_HTML_KEY) == html and context.get(_SOUP_KEY) is not None:
        return context[_SOUP_KEY]

    soup = BeautifulSoup(html, "html.parser")
    context[_SOUP_KEY] = soup
    context[_SOUP_HTML_KEY] = html
    return soup


def commit_soup(context: dict, soup: BeautifulSoup) -> str:
    """Serialise an edited tree and remember it as the current document."""
    html = str(soup)
    context[_SOUP_KEY] = soup
    context[_SOUP_HTML_KEY] = html
    return html


def release_soup(context: dict) -> None:
    context.pop(_SOUP_KEY, None)
    context.pop(_SOUP_HTML_KEY, None)
