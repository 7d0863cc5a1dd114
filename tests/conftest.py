from __future__ import annotations

from pathlib import Path

import pytest

from foliogen.config import SiteConfig
from foliogen.render import PageChrome, build_chrome


def make_document(title: str, date: str, description: str, body: str = "\nSome *body* text.\n") -> str:
    return f"===\ntitle: {title}\ndate: {date}\ndescription: {description}\n==={body}"


@pytest.fixture
def site_config() -> SiteConfig:
    return SiteConfig(
        name="Ada Example",
        github="https://github.com/example",
        linkedin="https://www.linkedin.com/in/example",
    )


@pytest.fixture
def chrome(site_config) -> PageChrome:
    return build_chrome(site_config)


@pytest.fixture
def write_docs(tmp_path):
    """Write ``{filename: text}`` into a fresh folder under tmp_path."""

    def _write(folder: str, docs: dict[str, str]) -> Path:
        target = tmp_path / folder
        target.mkdir(parents=True, exist_ok=True)
        for name, text in docs.items():
            (target / name).write_text(text, encoding="utf-8")
        return target

    return _write
