from __future__ import annotations

import html
import re
import shutil
from dataclasses import dataclass
from pathlib import Path

from .config import SiteConfig

SLOT_RE = re.compile(r"\{\{(\w+)\}\}")

BASE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{{title}}</title>
<link rel="stylesheet" href="/style.css">
<link rel="stylesheet" href="/highlight.css">
</head>
<body>
<div class="layout">
{{header}}
<main class="content">
{{content}}
</main>
</div>
<footer class="footer">{{footer}}</footer>
</body>
</html>
"""

GITHUB_FOOTER = (
    '<a href="{url}"><img src="/images/base/github-mark.svg" class="icon" width="32" height="32"></a>'
)
LINKEDIN_FOOTER = (
    '<a href="{url}"><img src="/images/base/linkedin-mark.svg" class="icon" width="32" height="32"></a>'
)


@dataclass(frozen=True)
class PageChrome:
    header: str
    footer: str


def render_template(template: str, **context: str) -> str:
    def repl(match: re.Match) -> str:
        return context[match.group(1)]

    return SLOT_RE.sub(repl, template)


def assemble_page(title: str, content: str, chrome: PageChrome) -> str:
    return render_template(
        BASE_TEMPLATE,
        title=title,
        header=chrome.header,
        content=content,
        footer=chrome.footer,
    )


def build_footer(config: SiteConfig) -> str:
    footer = ""
    if config.github:
        footer += GITHUB_FOOTER.format(url=html.escape(config.github))
        footer += "\n"
    if config.linkedin:
        footer += LINKEDIN_FOOTER.format(url=html.escape(config.linkedin))
    return footer


def build_header(config: SiteConfig) -> str:
    nav = [("/", "Projects"), ("/blog/", "Blog")]
    if config.about:
        nav.append((f"/{config.about.lstrip('/')}", "About"))
    if config.resume:
        nav.append((f"/{config.resume.lstrip('/')}", "Resume"))
    links = "".join(f'<li><a href="{html.escape(href)}">{label}</a></li>' for href, label in nav)
    picture = ""
    if config.profile_pic:
        picture = (
            f'<img src="{html.escape(config.profile_pic)}" class="profile-pic" '
            f'alt="{html.escape(config.name)}">'
        )
    return (
        '<header class="sidebar">'
        f"{picture}"
        f'<h1 class="site-name"><a href="/">{html.escape(config.name)}</a></h1>'
        f'<nav><ul class="nav">{links}</ul></nav>'
        "</header>"
    )


def build_chrome(config: SiteConfig) -> PageChrome:
    return PageChrome(header=build_header(config), footer=build_footer(config))


def write_text(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def copy_static(static_dir: Path, output_dir: Path) -> None:
    output_dir.mkdir(parents=True, exist_ok=True)
    for item in static_dir.iterdir():
        dest = output_dir / item.name
        if item.is_dir():
            if dest.exists():
                shutil.rmtree(dest)
            shutil.copytree(item, dest)
        else:
            shutil.copy2(item, dest)
