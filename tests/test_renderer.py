"""Tests for the markdown rendering pipeline."""

from __future__ import annotations

import datetime

from bs4 import BeautifulSoup
from django.template import Context, Template

from blog.markdown.preprocessors.front_matter import front_matter, parse_front_matter
from blog.markdown.renderer import render_markdown

FUNK_POST = """---
title: "Monads in Funk"
date: 2024-03-01
published: true
---
Some intro.

```funk
trait Foo :: Bar -> Baz
```
"""


class TestFrontMatter:
    def test_block_is_stripped_and_parsed(self):
        context: dict = {}
        body = front_matter(FUNK_POST, context)

        assert body.startswith("Some intro.")
        assert context["front_matter"] == {
            "title": "Monads in Funk",
            "date": datetime.date(2024, 3, 1),
            "published": True,
        }

    def test_text_without_block_is_unchanged(self):
        context: dict = {}
        assert front_matter("Just text", context) == "Just text"
        assert context["front_matter"] == {}

    def test_block_must_be_at_start(self):
        text = "Intro\n---\ntitle: x\n---\n"
        assert front_matter(text, {}) == text

    def test_yaml_values(self):
        context: dict = {}
        body = front_matter(
            "---\ntitle: 'It''s Funk'\ntags: [funk, monads]\npublished: no\n---\nbody\n",
            context,
        )

        assert body == "body\n"
        assert context["front_matter"] == {
            "title": "It's Funk",
            "tags": ["funk", "monads"],
            "published": False,
        }

    def test_empty_block(self):
        context: dict = {}
        assert front_matter("---\n---\nbody", context) == "body"
        assert context["front_matter"] == {}

    def test_closing_marker_must_start_a_line(self):
        context: dict = {}
        body = front_matter("---\nrule: \"a---b\"\ntitle: x\n---\nbody", context)
        assert body == "body"
        assert context["front_matter"] == {"rule": "a---b", "title": "x"}

    def test_invalid_yaml_is_dropped(self):
        context: dict = {}
        assert front_matter("---\ntitle: [unclosed\n---\nbody", context) == "body"
        assert context["front_matter"] == {}

    def test_non_mapping_is_ignored(self):
        assert parse_front_matter("- just\n- a list") == {}


class TestRenderMarkdown:
    def test_passes_body_to_pandoc(self, fake_pandoc):
        render_markdown(FUNK_POST)

        call = fake_pandoc[0]
        assert call["to"] == "html5"
        assert "--no-highlight" in call["extra_args"]
        assert "title:" not in call["source"]

    def test_funk_fence_is_highlighted_and_redecorated(self, fake_pandoc):
        html = render_markdown(FUNK_POST)

        code = BeautifulSoup(html, "html.parser").find("code")
        assert code["class"] == ["language-funk"]
        assert code["data-lang"] == "haskell"
        assert code["data-highlighted"] == "true"
        assert code.find("span", class_="funk-keyword").get_text() == "trait"
        assert code.find("span", class_="funk-arrow").get_text() == "->"

    def test_other_fences_are_not_redecorated(self, fake_pandoc):
        html = render_markdown("```haskell\ntrait Foo\n```")

        code = BeautifulSoup(html, "html.parser").find("code")
        assert code["class"] == ["language-haskell"]
        assert not code.has_attr("data-highlighted")
        assert code.find("span", class_="funk-keyword") is None

    def test_redecoration_can_be_disabled(self, fake_pandoc, settings):
        settings.FUNK_REDECORATE = False
        html = render_markdown("```funk\ntrait Foo\n```")

        code = BeautifulSoup(html, "html.parser").find("code")
        assert code["data-lang"] == "haskell"
        assert not code.has_attr("data-highlighted")

    def test_front_matter_is_returned_in_context(self, fake_pandoc):
        context: dict = {}
        render_markdown(FUNK_POST, context)
        assert context["front_matter"]["title"] == "Monads in Funk"

    def test_shared_soup_is_not_left_in_context(self, fake_pandoc):
        context: dict = {}
        render_markdown(FUNK_POST, context)
        assert not any(key.startswith("__shared_soup") for key in context)

    def test_marked_block_passes_through_byte_identical(self, monkeypatch):
        marked = '<pre><code class="language-funk" data-highlighted="true">trait Foo</code></pre>'
        monkeypatch.setattr(
            "blog.markdown.renderer.pypandoc.convert_text",
            lambda *args, **kwargs: marked,
        )
        assert render_markdown("raw html") == marked

    def test_disallowed_markup_is_escaped(self, monkeypatch):
        monkeypatch.setattr(
            "blog.markdown.renderer.pypandoc.convert_text",
            lambda *args, **kwargs: "<p>hi</p><script>alert(1)</script>",
        )
        html = render_markdown("hi")
        assert "<script>" not in html
        assert "&lt;script&gt;" in html


class TestMarkdownFilter:
    def test_filter_renders_markdown(self, fake_pandoc):
        template = Template("{% load markdown_tags %}{{ body|markdown }}")
        html = template.render(Context({"body": "```funk\nlet x\n```"}))

        assert 'class="funk-keyword"' in html
