# blog/markdown/postprocessors/code_highlighter.py
"""
Postprocessor that syntax-highlights fenced code blocks with Pygments.

Pandoc runs with its own highlighting turned off, so a fence like

    ```funk
    main :: IO ()
    ```

comes out as:

    <pre class="funk"><code>main :: IO ()</code></pre>

Each such block is replaced with Pygments token markup for the declared
language, after language aliases are applied:

    <pre class="highlight"><code class="language-funk" data-lang="haskell">
        <span class="nf">main</span> ...
    </code></pre>

The ``language-*`` class keeps the name the author wrote, and ``data-lang``
names the grammar that was actually used.
"""

import logging
from typing import Optional

from bs4 import BeautifulSoup, Tag

from ..highlighting import highlight_code, resolve_language
from .utils import commit_soup, get_shared_soup

logger = logging.getLogger(__name__)

# Classes pandoc puts on code blocks that are not language names
IGNORED_CLASSES = {"sourceCode", "highlight", "numberLines"}


def _classes(element: Tag) -> list:
    classes = element.get("class", [])
    if isinstance(classes, str):
        classes = classes.split()
    return classes


def declared_language(pre: Tag, code: Tag) -> Optional[str]:
    """
    Work out which language a code block was declared with.

    A ``language-X`` class on <code> wins; otherwise the first class on <code>
    or <pre> that is not one of pandoc's structural classes.
    """
    for cls in _classes(code):
        if cls.startswith("language-") and len(cls) > len("language-"):
            return cls[len("language-"):]

    for element in (code, pre):
        for cls in _classes(element):
            if cls not in IGNORED_CLASSES:
                return cls
    return None


def code_highlighter(html: str, context: dict) -> str:
    """
    Highlight every <pre><code> block that declares a language.

    Args:
        html: HTML string to process
        context: Context dictionary (shared soup cache)

    Returns:
        HTML with highlighted code blocks
    """
    soup = get_shared_soup(html, context)
    changed = False

    for pre in soup.find_all("pre"):
        # Skip blocks highlighted by an earlier pass
        if "highlight" in _classes(pre):
            continue

        code = pre.find("code", recursive=False)
        if code is None:
            continue

        # Already restyled by the funk pass; leave it byte-identical
        if code.get("data-highlighted"):
            continue

        language = declared_language(pre, code)
        if not language:
            continue

        grammar = resolve_language(language)
        logger.debug("Highlighting %s block with %s grammar", language, grammar)

        new_pre = soup.new_tag("pre")
        new_pre["class"] = ["highlight"]
        new_code = soup.new_tag("code")
        new_code["class"] = [f"language-{language}"]
        new_code["data-lang"] = grammar
        new_code.append(BeautifulSoup(highlight_code(code.get_text(), language), "html.parser"))
        new_pre.append(new_code)

        pre.replace_with(new_pre)
        changed = True

    if not changed:
        return html
    return commit_soup(context, soup)


def code_highlighter_default(html: str, context: dict) -> str:
    """
    Default configuration for code_highlighter.

    This is the function that should be registered in POSTPROCESSORS.
    """
    return code_highlighter(html, context)
