"""Read markdown content files into a validated ContentSnapshot.

Each file carries YAML frontmatter between leading ``---`` fences. The
site's source files are not consistent about field names (talks use
``name`` and ``websiteLink``, posts use ``title`` and ``pubDatetime``), so
known aliases are mapped onto record fields before validation.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml
from pydantic import ValidationError

from folio.content.models import (
    RECORD_ADAPTER,
    BlogPost,
    ContentKind,
    ContentSnapshot,
    SpeakingEngagement,
)
from folio.errors import ContentLoadError, FolioError

if TYPE_CHECKING:
    from folio.config import FolioConfig

logger = logging.getLogger(__name__)

FIELD_ALIASES: dict[str, str] = {
    "name": "title",
    "pubDatetime": "published_at",
    "pubDate": "published_at",
    "publishedAt": "published_at",
    "websiteLink": "website_link",
    "website": "website_link",
}

FRONTMATTER_RE = re.compile(r"\A---[ \t]*\r?\n(.*?)^---[ \t]*\r?$\n?", re.DOTALL | re.MULTILINE)

_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class FrontmatterLoader(yaml.SafeLoader):
    """SafeLoader that leaves timestamps as strings.

    Dates are parsed by ``parse_timestamp`` so that an impossible date such
    as ``2023-02-30`` fails as ``InvalidTimestamp`` naming its field.
    """


FrontmatterLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def split_frontmatter(text: str) -> tuple[str, str]:
    """Split markdown text into (frontmatter, body).

    Fences must sit on their own lines. Returns an empty frontmatter string
    when the text has no leading fence or the closing fence is missing.
    """
    match = FRONTMATTER_RE.match(text)
    if match is None:
        return "", text
    return match.group(1), text[match.end():].lstrip("\r\n")


def parse_frontmatter(text: str) -> dict[str, Any]:
    """Parse the YAML frontmatter of a markdown document.

    Raises:
        yaml.YAMLError: If the frontmatter is not valid YAML.
    """
    raw, _ = split_frontmatter(text)
    if not raw.strip():
        return {}
    data = yaml.load(raw, Loader=FrontmatterLoader)  # noqa: S506 -- SafeLoader subclass
    if not isinstance(data, dict):
        return {}
    return data


def normalize_frontmatter(fm: dict[str, Any], kind: ContentKind | str) -> dict[str, Any]:
    """Map frontmatter keys onto record field names for ``kind``.

    A bare ``date`` is the ordering timestamp unless ``pubDatetime`` (or
    another alias) already supplied one; on a talk it then becomes the
    displayed ``event_date``.
    """
    kind = ContentKind(kind)
    data: dict[str, Any] = {}
    for key, value in fm.items():
        target = FIELD_ALIASES.get(key, key)
        if target in data and key != target:
            continue
        data[target] = value

    if "date" in data:
        event_date = data.pop("date")
        if "published_at" not in data:
            data["published_at"] = event_date
        elif kind is ContentKind.TALK:
            data.setdefault("event_date", event_date)

    data["kind"] = kind.value
    return data


class ContentLoader:
    """Discovers and reads content markdown files."""

    pattern: str = "*.md"

    def load_directory(self, directory: Path, kind: ContentKind | str) -> ContentSnapshot:
        """Read every content file in ``directory`` as records of ``kind``.

        Files are read in sorted path order. A missing directory yields an
        empty snapshot.

        Raises:
            MissingRequiredField: A file lacks a required field.
            InvalidTimestamp: A file's date does not parse.
            ContentLoadError: A file cannot be read or has malformed frontmatter.
        """
        if not directory.exists():
            logger.warning("Content directory not found: %s", directory)
            return ContentSnapshot()

        records = [self.load_file(path, kind) for path in sorted(directory.glob(self.pattern))]
        logger.debug("Loaded %d %s records from %s", len(records), kind, directory)
        return ContentSnapshot(records=tuple(records))

    def load_file(self, path: Path, kind: ContentKind | str) -> BlogPost | SpeakingEngagement:
        """Read a single markdown file into a validated record."""
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ContentLoadError(path, f"could not read file: {exc}") from exc

        try:
            fm = parse_frontmatter(text)
        except yaml.YAMLError as exc:
            raise ContentLoadError(path, f"malformed frontmatter: {exc}") from exc

        data = normalize_frontmatter(fm, kind)
        if data["kind"] == ContentKind.POST and not data.get("slug"):
            data["slug"] = path.stem

        try:
            return RECORD_ADAPTER.validate_python(data)
        except ValidationError as exc:
            raise ContentLoadError(path, f"invalid frontmatter: {exc}") from exc
        except FolioError as exc:
            exc.add_note(f"while loading {path}")
            raise


def load_site(config: FolioConfig) -> ContentSnapshot:
    """Load posts and talks from the configured content directories."""
    loader = ContentLoader()
    posts = loader.load_directory(Path(config.content.posts_dir), ContentKind.POST)
    talks = loader.load_directory(Path(config.content.talks_dir), ContentKind.TALK)
    return posts.merge(talks)
