def get_pandoc_config():
    """
    Configuration for pypandoc/Pandoc markdown rendering.

    Pandoc's own syntax highlighting is switched off: fenced code comes out as
    plain <pre class="LANG"><code> blocks and is highlighted afterwards by the
    code_highlighter postprocessor, which knows about language aliases.
    """
    return {
        "extra_args": [
            # Enable Pandoc markdown extensions (all in --from argument)
            "--from=markdown+autolink_bare_uris+strikeout+superscript+subscript+task_lists+smart+pipe_tables+definition_lists+footnotes+fenced_code_blocks+fenced_code_attributes+raw_html+header_attributes",
            # Code highlighting happens in postprocessing
            "--no-highlight",
            "--mathjax",
        ],
        "filters": [],
    }
