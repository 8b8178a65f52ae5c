# blog/templatetags/highlight_tags.py
"""
Block tag for highlighting code directly in templates.

    {% load highlight_tags %}
    {% highlight funk %}
    main :: IO ()
    {% endhighlight %}

The language goes through the registered aliases, so the block above is
highlighted with the Haskell grammar and labelled ``haskell``. The language
may be quoted: ``{% highlight " funk " %}``.
"""

from django import template
from django.utils.html import format_html
from django.utils.safestring import mark_safe

from blog.markdown.highlighting import highlight_code, resolve_language

register = template.Library()


class HighlightNode(template.Node):
    def __init__(self, nodelist, language):
        self.nodelist = nodelist
        self.language = language

    def render(self, context):
        code = self.nodelist.render(context).strip("\n")
        return format_html(
            '<figure class="highlight"><pre><code class="language-{0}" data-lang="{0}">{1}</code></pre></figure>',
            self.language,
            mark_safe(highlight_code(code, self.language)),
        )


@register.tag(name="highlight")
def do_highlight(parser, token):
    bits = token.split_contents()
    if len(bits) != 2:
        raise template.TemplateSyntaxError(
            f"'{bits[0]}' tag takes exactly one argument, the language name"
        )

    language = bits[1]
    if len(language) >= 2 and language[0] == language[-1] and language[0] in "\"'":
        language = language[1:-1]
    language = language.strip()
    if not language:
        raise template.TemplateSyntaxError(f"'{bits[0]}' tag needs a language name")

    nodelist = parser.parse(("endhighlight",))
    parser.delete_first_token()
    return HighlightNode(nodelist, resolve_language(language))
