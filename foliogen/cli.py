from __future__ import annotations

import argparse
import sys
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .categories import CATEGORY_TABLE, Category
from .config import SiteConfig, load_site_config
from .markdown_ext import highlight_css
from .pages import ListingEntry, PublishReport, build_listing, publish_folder
from .render import build_chrome, copy_static, write_text
from .utils import clean_output_dir

DEFAULT_OUTPUT = "site"


@dataclass
class BuildReport:
    published: dict[Category, PublishReport] = field(default_factory=dict)
    listings: dict[Category, Path] = field(default_factory=dict)
    failed: list[Category] = field(default_factory=list)

    @property
    def error_count(self) -> int:
        return len(self.failed) + sum(len(item.errors) for item in self.published.values())


def build_site(
    config: SiteConfig,
    source_root: Path,
    output_dir: Path,
    static_dir: Optional[Path] = None,
) -> BuildReport:
    report = BuildReport()
    chrome = build_chrome(config)

    output_dir.mkdir(parents=True, exist_ok=True)
    if static_dir is not None and static_dir.is_dir():
        copy_static(static_dir, output_dir)
    write_text(output_dir / "highlight.css", highlight_css())

    for category, spec in CATEGORY_TABLE.items():
        source_dir = source_root / spec.source_dir
        dest_dir = output_dir / spec.dest_dir
        listing: Optional[list[ListingEntry]] = [] if spec.produces_listing else None
        print(f"Publishing {category.value} pages from {source_dir}...")
        try:
            published = publish_folder(source_dir, dest_dir, category, chrome, listing)
        except OSError as exc:
            print(f"[{category.value}] could not read {source_dir}: {exc}", file=sys.stderr)
            report.failed.append(category)
            continue
        report.published[category] = published
        print(f"  {len(published.written)} page(s) written, {len(published.errors)} skipped.")
        if listing is not None:
            try:
                target = build_listing(listing, spec, config.name, chrome, output_dir)
            except OSError as exc:
                print(f"[{category.value}] could not write listing {spec.listing_path}: {exc}", file=sys.stderr)
                report.failed.append(category)
                continue
            report.listings[category] = target
            print(f"  Listing written to {target}")
    return report


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Build a personal site from folders of Markdown documents.")
    parser.add_argument(
        "--config",
        default="config.toml",
        help="Path to site config file (TOML/YAML/JSON).",
    )
    parser.add_argument(
        "--source",
        default=None,
        help="Directory holding the special/, posts/ and projects/ folders (default: config directory).",
    )
    parser.add_argument("--output", default=None, help="Output directory for the site.")
    parser.add_argument(
        "--static",
        default=None,
        help="Directory of static assets copied into the output (default: <source>/static).",
    )
    parser.add_argument(
        "--clean",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Delete the output directory before building.",
    )
    args = parser.parse_args(argv)

    config_path = Path(args.config)
    print("Building site...")
    config = load_site_config(config_path)

    source_root = Path(args.source) if args.source else config_path.parent
    output_dir = Path(args.output or config.output or DEFAULT_OUTPUT)
    if not output_dir.is_absolute() and not args.output:
        output_dir = source_root / output_dir
    static_dir = Path(args.static) if args.static else source_root / "static"

    if args.clean:
        clean_output_dir(output_dir, source_root)

    start = time.perf_counter()
    report = build_site(config, source_root, output_dir, static_dir)
    elapsed = time.perf_counter() - start
    print(f"Build completed in {elapsed:.2f}s with {report.error_count} error(s).")
    print(f"Site generated in: {output_dir}")
    return 0
