from __future__ import annotations

import html
import re

import pytest

_FENCE_RE = re.compile(r"^```[ \t]*(\S*)[ \t]*\n(.*?)\n```[ \t]*$", re.MULTILINE | re.DOTALL)


def fake_convert_text(source, to, format, extra_args=None, filters=None):
    """Stand-in for pandoc: fenced code blocks and paragraphs only."""
    blocks = []
    pos = 0
    for match in _FENCE_RE.finditer(source):
        blocks.extend(_paragraphs(source[pos:match.start()]))
        language, code = match.groups()
        cls = f' class="{language}"' if language else ""
        blocks.append(f"<pre{cls}><code>{html.escape(code, quote=False)}</code></pre>")
        pos = match.end()
    blocks.extend(_paragraphs(source[pos:]))
    return "\n".join(blocks)


def _paragraphs(text):
    return [f"<p>{html.escape(p.strip(), quote=False)}</p>" for p in text.split("\n\n") if p.strip()]


@pytest.fixture
def fake_pandoc(monkeypatch):
    calls = []

    def convert(source, to, format, extra_args=None, filters=None):
        calls.append({"source": source, "to": to, "format": format, "extra_args": extra_args})
        return fake_convert_text(source, to, format, extra_args, filters)

    monkeypatch.setattr("blog.markdown.renderer.pypandoc.convert_text", convert)
    return calls
