# blog/markdown/postprocessors/funk_redecorator.py
"""
Postprocessor that restyles code blocks written in Funk.

Funk fences are highlighted with the Haskell grammar, which gets most of the
language wrong. This pass throws that markup away and rebuilds it from the
block's plain text with a fixed sequence of regex substitutions, wrapping
each recognised piece in a ``funk-*`` span:

    <code class="language-funk">trait Foo :: Bar</code>

becomes

    <code class="language-funk" data-highlighted="true"><span class="funk-keyword">trait</span>
    <span class="funk-type-constructor">Foo</span> <span class="funk-type-annotation">::</span>
    <span class="funk-type-constructor">Bar</span></code>

The substitutions are plain find-and-wrap passes over the evolving string, not
a tokenizer. Each later rule sees the markup inserted by the earlier ones, so
the order of SUBSTITUTION_RULES decides the output and must not change.

The substituted text is written back as markup without re-escaping. Source
text containing ``<`` or ``&`` will be parsed as markup.
"""

import logging
import re
from typing import NamedTuple, Pattern, Tuple

from bs4 import BeautifulSoup
from django.conf import settings

from .utils import commit_soup, get_shared_soup

logger = logging.getLogger(__name__)

FUNK_LANGUAGE_CLASS = "language-funk"
PROCESSED_ATTRIBUTE = "data-highlighted"

# Some posts render the long Monad example twice inside one block.
DUPLICATED_EXAMPLE_MARKER = "trait Monad"

# Whitespace removed by a browser's String.prototype.trim. Differs from str.strip():
# keeps \x1c-\x1f and \x85, removes \ufeff.
TRIM_CHARACTERS = (
    " \t\n\v\f\r\u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006"
    "\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)


class SubstitutionRule(NamedTuple):
    category: str
    pattern: Pattern
    replacement: str


def _wrap(category: str, content: str) -> str:
    return f'<span class="funk-{category}">{content}</span>'


def _rule(category: str, pattern: str, content: str) -> SubstitutionRule:
    # ASCII word boundaries, matching what browsers use for \b
    return SubstitutionRule(category, re.compile(pattern, re.ASCII), _wrap(category, content))


SUBSTITUTION_RULES: Tuple[SubstitutionRule, ...] = (
    _rule("keyword", r"\b(trait|let|forall)\b", r"\1"),
    _rule("type-annotation", r"::", "::"),
    _rule("arrow", r"->", "->"),
    _rule("type-constructor", r"\b([A-Z][a-zA-Z]*)\b", r"\1"),
    _rule("special-symbol", r"#([a-zA-Z]+)", r"#\1"),
    _rule("rainbow-bracket-1", r"\(", "("),
    _rule("rainbow-bracket-1", r"\)", ")"),
    _rule("rainbow-bracket-2", r"\{", "{"),
    _rule("rainbow-bracket-2", r"\}", "}"),
)


def collapse_duplicate_example(text: str) -> str:
    """
    Keep only the first copy of a duplicated ``trait Monad`` example.

    Fires only when the marker occurs more than once. The result is the marker
    followed by everything up to its second occurrence; any text before the
    first occurrence is dropped.
    """
    parts = text.split(DUPLICATED_EXAMPLE_MARKER)
    if len(parts) > 2:
        return DUPLICATED_EXAMPLE_MARKER + parts[1]
    return text


def decorate_funk_source(text: str) -> str:
    """Turn the plain text of a Funk block into styled markup."""
    text = collapse_duplicate_example(text.strip(TRIM_CHARACTERS))
    for rule in SUBSTITUTION_RULES:
        text = rule.pattern.sub(rule.replacement, text)
    return text


def redecorate_code_blocks(soup: BeautifulSoup) -> int:
    """
    Rewrite every unprocessed Funk code block in ``soup``.

    Blocks already carrying the processed attribute are left untouched, so
    running this any number of times gives the same markup as running it
    once. Returns the number of blocks rewritten.
    """
    count = 0
    for code in soup.find_all("code", class_=FUNK_LANGUAGE_CLASS):
        if code.get(PROCESSED_ATTRIBUTE):
            continue
        code[PROCESSED_ATTRIBUTE] = "true"

        decorated = decorate_funk_source(code.get_text())
        code.clear()
        code.append(BeautifulSoup(decorated, "html.parser"))
        count += 1

    if count:
        logger.debug("Redecorated %d funk code block(s)", count)
    return count


def funk_redecorator(html: str, context: dict) -> str:
    soup = get_shared_soup(html, context)
    if not redecorate_code_blocks(soup):
        return html
    return commit_soup(context, soup)


def funk_redecorator_default(html: str, context: dict) -> str:
    """
    Default configuration for funk_redecorator.

    This is the function that should be registered in POSTPROCESSORS.
    Disabled when settings.FUNK_REDECORATE is False.
    """
    if not getattr(settings, "FUNK_REDECORATE", True):
        return html
    return funk_redecorator(html, context)
