# blog/markdown/highlighting.py
"""
Language aliases and Pygments highlighting for code blocks.

Posts may declare fenced code in languages Pygments does not know about. An
alias maps such a name onto an existing lexer, so the block is classified
with that lexer's grammar and CSS classes:

    register_language_alias("funk", "haskell")
    resolve_language(" funk ")   # -> "haskell"
    resolve_language("funky")    # -> "funky" (no partial matches)

Aliases are registered once at startup from the HIGHLIGHT_LANGUAGE_ALIASES
setting (see BlogConfig.ready).
"""

import logging
from typing import Dict

from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexer import Lexer
from pygments.lexers import TextLexer, get_lexer_by_name
from pygments.util import ClassNotFound

logger = logging.getLogger(__name__)

_ALIASES: Dict[str, str] = {}


class LanguageAliasError(ValueError):
    """Raised when an alias points at a lexer Pygments cannot find."""


def register_language_alias(alias: str, target: str) -> None:
    """Register ``alias`` as another name for the Pygments lexer ``target``."""
    alias = alias.strip()
    target = target.strip()
    if not alias:
        raise LanguageAliasError("Language alias must not be empty")

    try:
        get_lexer_by_name(target)
    except ClassNotFound as e:
        raise LanguageAliasError(
            f"Cannot alias '{alias}' to unknown language '{target}'"
        ) from e

    _ALIASES[alias] = target
    logger.debug("Registered language alias %s -> %s", alias, target)


def language_aliases() -> Dict[str, str]:
    """Return a copy of the registered aliases."""
    return dict(_ALIASES)


def resolve_language(name: str) -> str:
    """
    Map a declared language name to the grammar used to highlight it.

    The name is compared after trimming surrounding whitespace and must equal
    a registered alias exactly. Anything else is returned unmodified.
    """
    if name is None:
        return name
    target = _ALIASES.get(name.strip())
    if target is None:
        return name
    return target


def get_lexer(name: str) -> Lexer:
    """Return a lexer for ``name``, falling back to plain text."""
    language = resolve_language(name).strip()
    try:
        return get_lexer_by_name(language)
    except ClassNotFound:
        logger.warning("No lexer for language '%s', highlighting as text", language)
        return TextLexer()


def highlight_code(code: str, language: str) -> str:
    """
    Highlight ``code`` with the grammar for ``language``.

    Returns the token spans only (no wrapping <div>/<pre>), so callers decide
    the surrounding markup.
    """
    return highlight(code, get_lexer(language), HtmlFormatter(nowrap=True))
