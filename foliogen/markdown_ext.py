from __future__ import annotations

import markdown
from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

from pygments.formatters import HtmlFormatter

from .content import normalize_block_spacing

EXTERNAL_PREFIXES = ("http://", "https://", "//")
HIGHLIGHT_CLASS = "highlight"
HIGHLIGHT_STYLE = "default"


class ExternalLinkProcessor(Treeprocessor):
    def run(self, root):
        for el in root.iter("a"):
            href = el.get("href", "")
            if href.startswith(EXTERNAL_PREFIXES):
                el.set("target", "_blank")
                el.set("rel", "noopener noreferrer")


class ExternalLinkExtension(Extension):
    def extendMarkdown(self, md):
        # after "inline" (20)
        md.treeprocessors.register(ExternalLinkProcessor(md), "external_links", 5)


def build_markdown() -> markdown.Markdown:
    return markdown.Markdown(
        extensions=["extra", "toc", "sane_lists", "codehilite", ExternalLinkExtension()],
        extension_configs={
            "codehilite": {"css_class": HIGHLIGHT_CLASS, "guess_lang": False},
        },
    )


def render_markdown(text: str) -> str:
    md = build_markdown()
    html_content = md.convert(normalize_block_spacing(text))
    md.reset()
    return html_content


def highlight_css() -> str:
    return HtmlFormatter(style=HIGHLIGHT_STYLE).get_style_defs(f".{HIGHLIGHT_CLASS}")
