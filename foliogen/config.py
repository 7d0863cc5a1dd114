from __future__ import annotations

import json
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path

import yaml


@dataclass(frozen=True)
class SiteConfig:
    name: str
    profile_pic: str = ""
    github: str = ""
    linkedin: str = ""
    about: str = ""
    resume: str = ""
    output: str = ""

    @classmethod
    def from_mapping(cls, data: dict) -> "SiteConfig":
        def text(mapping: object, key: str) -> str:
            if not isinstance(mapping, dict):
                return ""
            value = mapping.get(key)
            return "" if value is None else str(value).strip()

        name = text(data, "Name")
        if not name:
            print("Config is missing the required 'Name' value.", file=sys.stderr)
            sys.exit(1)
        footer = data.get("Footer") or {}
        return cls(
            name=name,
            profile_pic=text(data, "ProfilePic"),
            github=text(footer, "Github"),
            linkedin=text(footer, "Linkedin"),
            about=text(data, "About"),
            resume=text(data, "Resume"),
            output=text(data, "Output"),
        )


def load_config(path: Path) -> dict:
    if not path.is_file():
        print(f"Config file not found: {path}", file=sys.stderr)
        sys.exit(1)
    suffix = path.suffix.lower()
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Could not read config file {path}: {exc}", file=sys.stderr)
        sys.exit(1)
    if suffix == ".toml":
        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as exc:
            print(f"Invalid TOML in config file {path}: {exc}", file=sys.stderr)
            sys.exit(1)
    elif suffix in {".yml", ".yaml"}:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            print(f"Invalid YAML in config file {path}: {exc}", file=sys.stderr)
            sys.exit(1)
    else:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            print(f"Invalid JSON in config file {path}: {exc}", file=sys.stderr)
            sys.exit(1)
    if not isinstance(data, dict):
        print(f"Config must be a mapping: {path}", file=sys.stderr)
        sys.exit(1)
    return data


def load_site_config(path: Path) -> SiteConfig:
    return SiteConfig.from_mapping(load_config(path))
