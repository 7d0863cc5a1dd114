from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional


class Category(enum.Enum):
    SPECIAL = "special"
    BLOG = "blog"
    PROJECT = "project"


@dataclass(frozen=True)
class CategorySpec:
    source_dir: str
    dest_dir: str
    url_prefix: str
    listing_path: Optional[str] = None
    listing_suffix: str = ""

    @property
    def produces_listing(self) -> bool:
        return self.listing_path is not None

    def listing_title(self, site_name: str) -> str:
        return f"{site_name} · {self.listing_suffix}"


# publishing order; the projects listing is the homepage
CATEGORY_TABLE: dict[Category, CategorySpec] = {
    Category.SPECIAL: CategorySpec(source_dir="special", dest_dir="", url_prefix="/"),
    Category.BLOG: CategorySpec(
        source_dir="posts",
        dest_dir="blog",
        url_prefix="/blog",
        listing_path="blog/index.html",
        listing_suffix="Blog",
    ),
    Category.PROJECT: CategorySpec(
        source_dir="projects",
        dest_dir="projects",
        url_prefix="/projects",
        listing_path="index.html",
        listing_suffix="Projects",
    ),
}
