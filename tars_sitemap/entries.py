# Tars sitemap generator
# Copyright (C) 2025-6, Nathan Gill
# Licensed under the MIT license
# See LICENSE_MIT for details

import json
import logging
import posixpath
from dataclasses import dataclass
from datetime import date, datetime, timezone
from email.utils import format_datetime, parsedate_to_datetime
from pathlib import PurePosixPath

from .options import as_priority

logger = logging.getLogger(__name__)

INVALID_DATE = "Invalid Date"


@dataclass
class SitemapEntry:
    url: str
    changefreq: str | None = None
    priority: float | None = None
    lastmod: str | None = None


def chomp_right(s, suffix):
    if suffix and s.endswith(suffix):
        return s[:-len(suffix)]
    return s


def glob_match(p, glob):
    # wildcards never match dot-prefixed names
    hidden = [part for part in p.parts if part.startswith(".")]
    dotted = [seg for seg in glob.split("/") if seg.startswith(".")]
    if len(hidden) > len(dotted):
        return False
    return p.full_match(glob)


def matches_pattern(path, pattern):
    """
    Match a file path against one glob or a list of globs.

    Patterns apply in order; a pattern starting with "!" removes paths
    that an earlier pattern matched.
    """
    patterns = [pattern] if isinstance(pattern, str) else list(pattern)
    p = PurePosixPath(path.replace("\\", "/"))

    matched = False
    for glob in patterns:
        if glob.startswith("!"):
            if matched and glob_match(p, glob[1:]):
                matched = False
        elif not matched and glob_match(p, glob):
            matched = True

    return matched


def check(path, record, options):
    if not matches_pattern(path, options.pattern):
        return False

    if record.get("private"):
        return False

    return True


def build_url(path, record, options):
    normalized = path.replace("\\", "/")
    canonical = record.get("canonical")

    if isinstance(canonical, str) and canonical:
        url = canonical
    elif options.omit_index and posixpath.basename(normalized) == "index.html":
        url = chomp_right(normalized, "index.html")
    elif options.omit_extension:
        url = chomp_right(normalized, posixpath.splitext(normalized)[1])
    else:
        url = normalized

    if not url.endswith("/"):
        url += "/"

    return url


def parse_date(value):
    """Parse a lastmod value into an aware UTC datetime, or return None."""
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        dt = datetime(value.year, value.month, value.day)
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        # epoch milliseconds
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (ValueError, OverflowError, OSError):
            return None
    elif isinstance(value, str):
        try:
            dt = datetime.fromisoformat(value.strip())
        except ValueError:
            try:
                dt = parsedate_to_datetime(value)
            except (TypeError, ValueError):
                return None
    else:
        return None

    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def format_lastmod(value):
    dt = parse_date(value)
    if dt is None:
        logger.warning(f"Unparsable lastmod value {value!r}")
        return INVALID_DATE
    return format_datetime(dt, usegmt=True)


def resolve_metadata(record, options):
    changefreq = record.get("changefreq")
    if changefreq is None:
        changefreq = options.changefreq

    priority = as_priority(record.get("priority"))
    if priority is None:
        priority = options.priority

    lastmod = record.get("lastmod")
    if lastmod is None:
        lastmod = options.lastmod

    meta = {}
    if changefreq is not None:
        meta["changefreq"] = changefreq
    if priority is not None:
        meta["priority"] = priority
    if lastmod is not None:
        meta["lastmod"] = format_lastmod(lastmod)

    return meta


def build_entry(path, record, options):
    return SitemapEntry(url=build_url(path, record, options), **resolve_metadata(record, options))


def load_static_entries(json_file, options):
    """
    Read extra sitemap entries from a JSON file.

    Each record's "path" is appended to the hostname as is, without the
    trailing slash that file derived URLs get.
    """
    with open(json_file, encoding="utf-8") as f:
        records = json.load(f)

    if isinstance(records, dict):
        records = list(records.values())
    elif not isinstance(records, list):
        records = []

    entries = []
    for record in records:
        if not isinstance(record, dict):
            record = {}
        path = record.get("path")
        url = f"{options.hostname}/{path}" if path else ""
        entries.append(SitemapEntry(url=url, **resolve_metadata(record, options)))

    return entries
