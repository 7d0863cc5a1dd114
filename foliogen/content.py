from __future__ import annotations

import datetime as dt
import re
from dataclasses import dataclass
from pathlib import PurePath
from typing import Optional

DELIMITER = "==="
LABELS = ("title", "date", "description")
DATE_FMT = "%m-%d-%Y"
LIST_MARKER_RE = re.compile(r"^(?P<indent>[ \t]*)(?:[-+*]|\d+[.)])\s+")
FENCE_RE = re.compile(r"^(?P<indent>[ \t]*)(`{3,}|~{3,})")
QUOTE_RE = re.compile(r"^[ \t]{0,3}>")


class FrontmatterError(ValueError):
    pass


@dataclass(frozen=True)
class Frontmatter:
    title: str
    date: str
    description: str
    sort_key: Optional[dt.date] = None

    def missing_fields(self) -> list[str]:
        return [label for label in LABELS if not getattr(self, label)]


def split_front_matter(text: str) -> tuple[str, str]:
    clean_text = text.lstrip("\ufeff")
    count = clean_text.count(DELIMITER)
    if count != 2:
        raise FrontmatterError(f"expected the {DELIMITER!r} delimiter exactly twice, found {count}")
    start = clean_text.index(DELIMITER) + len(DELIMITER)
    end = clean_text.index(DELIMITER, start)
    return clean_text[start:end], clean_text[end + len(DELIMITER) :]


def parse_fields(block: str) -> dict[str, str]:
    collapsed = block.replace("\r", "").replace("\n", "")
    spans = []
    cursor = 0
    for label in LABELS:
        pos = collapsed.find(f"{label}:", cursor)
        if pos == -1:
            spans.append((label, -1, -1))
            continue
        value_start = pos + len(label) + 1
        if collapsed.startswith(" ", value_start):
            value_start += 1
        spans.append((label, pos, value_start))
        cursor = value_start

    fields = {}
    for idx, (label, pos, value_start) in enumerate(spans):
        if pos == -1:
            fields[label] = ""
            continue
        value_end = len(collapsed)
        for _, next_pos, _ in spans[idx + 1 :]:
            if next_pos != -1:
                value_end = next_pos
                break
        fields[label] = collapsed[value_start:value_end]
    return fields


def parse_sort_key(value: str) -> Optional[dt.date]:
    try:
        return dt.datetime.strptime(value.strip(), DATE_FMT).date()
    except ValueError:
        return None


def parse_front_matter(text: str) -> tuple[str, Frontmatter]:
    block, body = split_front_matter(text)
    fields = parse_fields(block)
    meta = Frontmatter(
        title=fields["title"],
        date=fields["date"],
        description=fields["description"],
        sort_key=parse_sort_key(fields["date"]),
    )
    return body, meta


def output_filename(source_name: str) -> str:
    return PurePath(source_name).with_suffix(".html").name


def normalize_block_spacing(text: str) -> str:
    lines = text.splitlines()
    out: list[str] = []
    in_fence = False
    fence_marker = ""
    for line in lines:
        prev_is_text = bool(out) and bool(out[-1].strip())
        fence_match = FENCE_RE.match(line)
        if fence_match:
            marker = fence_match.group(2)
            if not in_fence:
                in_fence = True
                fence_marker = marker
                if prev_is_text and not fence_match.group("indent"):
                    out.append("")
            elif marker == fence_marker:
                in_fence = False
                fence_marker = ""
            out.append(line)
            continue
        if in_fence:
            out.append(line)
            continue
        list_match = LIST_MARKER_RE.match(line)
        if list_match and not list_match.group("indent"):
            if prev_is_text and not LIST_MARKER_RE.match(out[-1]):
                out.append("")
        elif QUOTE_RE.match(line):
            if prev_is_text and not QUOTE_RE.match(out[-1]):
                out.append("")
        out.append(line)
    return "\n".join(out)
