from __future__ import annotations

import datetime as dt
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .categories import Category, CategorySpec
from .content import FrontmatterError, parse_front_matter, output_filename
from .markdown_ext import render_markdown
from .render import PageChrome, assemble_page, write_text
from .utils import join_url

LISTING_SEPARATOR = '<hr class="listing-separator">'
EMPTY_LISTING = '<p class="listing-empty">Nothing published yet.</p>'


@dataclass(frozen=True)
class ListingEntry:
    title: str
    date: str
    description: str
    output_name: str
    sort_key: Optional[dt.date] = None


@dataclass(frozen=True)
class DocumentError:
    path: Path
    message: str


@dataclass
class PublishReport:
    category: Category
    written: list[Path] = field(default_factory=list)
    errors: list[DocumentError] = field(default_factory=list)
    warnings: list[DocumentError] = field(default_factory=list)

    def report(self, path: Path, message: str) -> None:
        self.errors.append(DocumentError(path, message))
        print(f"[{self.category.value}] {path}: {message}", file=sys.stderr)

    def warn(self, path: Path, message: str) -> None:
        self.warnings.append(DocumentError(path, message))
        print(f"[{self.category.value}] {path}: {message}", file=sys.stderr)


def list_documents(source_dir: Path) -> list[Path]:
    entries = list(source_dir.iterdir())
    return sorted((path for path in entries if path.is_file()), key=lambda p: p.name)


def publish_folder(
    source_dir: Path,
    dest_dir: Path,
    category: Category,
    chrome: PageChrome,
    listing: Optional[list[ListingEntry]] = None,
) -> PublishReport:
    report = PublishReport(category)
    for path in list_documents(source_dir):
        try:
            raw_text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            report.report(path, f"could not read file: {exc}")
            continue
        try:
            body, meta = parse_front_matter(raw_text)
        except FrontmatterError as exc:
            report.report(path, f"malformed frontmatter: {exc}")
            continue
        missing = meta.missing_fields()
        if missing:
            report.report(path, f"malformed frontmatter: missing {', '.join(missing)}")
            continue
        if meta.sort_key is None:
            report.warn(path, f"could not parse date {meta.date.strip()!r}, sorting it last")

        html_doc = assemble_page(meta.title, render_markdown(body), chrome)
        name = output_filename(path.name)
        target = dest_dir / name
        try:
            write_text(target, html_doc)
        except OSError as exc:
            report.report(path, f"could not write {target}: {exc}")
            continue
        report.written.append(target)
        if listing is not None:
            listing.append(
                ListingEntry(
                    title=meta.title,
                    date=meta.date,
                    description=meta.description,
                    output_name=name,
                    sort_key=meta.sort_key,
                )
            )
    return report


def sort_entries(entries: list[ListingEntry]) -> list[ListingEntry]:
    return sorted(entries, key=lambda entry: entry.sort_key or dt.date.min, reverse=True)


def render_listing(entries: list[ListingEntry], url_prefix: str) -> str:
    if not entries:
        return EMPTY_LISTING
    blocks = []
    for entry in entries:
        link = join_url(url_prefix, entry.output_name)
        blocks.append(
            '<article class="listing-entry">'
            f'<h2 class="listing-title"><a href="{link}">{entry.title}</a></h2>'
            f'<p class="listing-date">{entry.date}</p>'
            f'<p class="listing-description">{entry.description}</p>'
            "</article>"
        )
    return f"\n{LISTING_SEPARATOR}\n".join(blocks)


def build_listing(
    entries: list[ListingEntry],
    spec: CategorySpec,
    site_name: str,
    chrome: PageChrome,
    output_dir: Path,
) -> Path:
    if not spec.produces_listing:
        raise ValueError(f"category {spec.source_dir!r} has no listing page")
    content = (
        f'<section class="listing"><h1>{spec.listing_suffix}</h1>\n'
        f"{render_listing(sort_entries(entries), spec.url_prefix)}\n"
        "</section>"
    )
    target = output_dir / spec.listing_path
    write_text(target, assemble_page(spec.listing_title(site_name), content, chrome))
    return target
