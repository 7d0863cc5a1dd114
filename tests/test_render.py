from __future__ import annotations

import pytest

from foliogen.config import SiteConfig
from foliogen.render import (
    PageChrome,
    assemble_page,
    build_chrome,
    build_footer,
    build_header,
    copy_static,
    render_template,
)


def test_render_template_is_single_pass():
    output = render_template("{{a}}|{{b}}", a="{{b}}", b="x")
    assert output == "{{b}}|x"


def test_render_template_requires_every_slot():
    with pytest.raises(KeyError):
        render_template("{{title}} {{content}}", title="only title")


def test_assemble_page_fills_slots_in_order():
    chrome = PageChrome(header="<header>HEAD</header>", footer="FOOT")

    page = assemble_page("My title", "<p>BODY</p>", chrome)

    assert "<title>My title</title>" in page
    positions = [page.index(token) for token in ("My title", "HEAD", "BODY", "FOOT")]
    assert positions == sorted(positions)
    assert "{{" not in page


def test_assemble_page_is_deterministic(chrome):
    first = assemble_page("Title", "<p>x</p>", chrome)
    second = assemble_page("Title", "<p>x</p>", chrome)
    assert first == second


def test_content_with_slot_syntax_is_kept_literally(chrome):
    page = assemble_page("Templates", "<code>{{footer}}</code>", chrome)
    assert "<code>{{footer}}</code>" in page


def test_footer_with_both_links():
    footer = build_footer(SiteConfig(name="x", github="https://github.com/a", linkedin="https://linkedin.com/in/a"))

    github, linkedin = footer.split("\n")
    assert 'href="https://github.com/a"' in github
    assert "github-mark.svg" in github
    assert 'href="https://linkedin.com/in/a"' in linkedin
    assert "linkedin-mark.svg" in linkedin


def test_footer_with_only_github():
    footer = build_footer(SiteConfig(name="x", github="https://github.com/a"))
    assert footer.endswith("</a>\n")
    assert "linkedin" not in footer


def test_empty_footer_produces_no_links():
    config = SiteConfig(name="Plain")
    assert build_footer(config) == ""

    page = assemble_page("Page", "<p>content</p>", build_chrome(config))

    assert '<footer class="footer"></footer>' in page
    assert "github-mark" not in page
    assert "linkedin-mark" not in page


def test_header_escapes_name_and_lists_optional_pages():
    header = build_header(SiteConfig(name="A & B", profile_pic="/me.jpg", about="about.html"))

    assert "A &amp; B" in header
    assert 'src="/me.jpg"' in header
    assert 'href="/about.html"' in header
    assert "Resume" not in header


def test_copy_static_overwrites(tmp_path):
    static_dir = tmp_path / "static"
    (static_dir / "images").mkdir(parents=True)
    (static_dir / "style.css").write_text("body {}", encoding="utf-8")
    (static_dir / "images" / "a.svg").write_text("<svg/>", encoding="utf-8")
    output_dir = tmp_path / "out"
    (output_dir / "images").mkdir(parents=True)
    (output_dir / "images" / "stale.svg").write_text("old", encoding="utf-8")

    copy_static(static_dir, output_dir)

    assert (output_dir / "style.css").read_text(encoding="utf-8") == "body {}"
    assert (output_dir / "images" / "a.svg").exists()
    assert not (output_dir / "images" / "stale.svg").exists()
