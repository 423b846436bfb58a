# Tars sitemap generator
# Copyright (C) 2025-6, Nathan Gill
# Licensed under the MIT license
# See LICENSE_MIT for details

import math
from dataclasses import dataclass
from pathlib import PurePath

DEFAULT_CHANGEFREQ = "weekly"
DEFAULT_OUTPUT = "sitemap.xml"
DEFAULT_PATTERN = "**/*.html"
DEFAULT_PRIORITY = 0.5

# camelCase spellings used by site configs, mapped to field names
OPTION_ALIASES = {
    "omitExtension": "omit_extension",
    "omitIndex": "omit_index",
    "jsonFile": "json_file",
}


class ConfigurationError(ValueError):
    pass


@dataclass(frozen=True)
class SitemapOptions:
    hostname: str
    changefreq: str = DEFAULT_CHANGEFREQ
    lastmod: object = None
    omit_extension: bool = False
    omit_index: bool = False
    output: str = DEFAULT_OUTPUT
    pattern: str | tuple[str, ...] = DEFAULT_PATTERN
    priority: float = DEFAULT_PRIORITY
    json_file: str | None = None


def as_priority(value):
    """Return value as a float, or None if it is not a valid number."""
    if value is None or isinstance(value, bool):
        return None
    try:
        p = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(p):
        return None
    return p


def resolve_options(opts):
    """
    Normalise plugin options into a SitemapOptions record.

    opts may be a bare hostname string, a mapping of options or an
    already resolved SitemapOptions.
    """
    if isinstance(opts, SitemapOptions):
        raw = dict(vars(opts))
    elif isinstance(opts, str):
        raw = {"hostname": opts}
    else:
        raw = {OPTION_ALIASES.get(k, k): v for k, v in dict(opts or {}).items()}

    hostname = raw.get("hostname")
    if not hostname:
        raise ConfigurationError('"hostname" option required')

    json_file = raw.get("json_file") or None
    if json_file is not None and PurePath(json_file).suffix != ".json":
        raise ConfigurationError('"jsonFile" must point to a JSON file with extension .json')

    pattern = raw.get("pattern") or DEFAULT_PATTERN
    if not isinstance(pattern, str):
        pattern = tuple(pattern)

    priority = as_priority(raw.get("priority"))
    if priority is None:
        priority = DEFAULT_PRIORITY

    return SitemapOptions(
        hostname=hostname,
        changefreq=raw.get("changefreq") or DEFAULT_CHANGEFREQ,
        lastmod=raw.get("lastmod"),
        omit_extension=bool(raw.get("omit_extension")),
        omit_index=bool(raw.get("omit_index")),
        output=raw.get("output") or DEFAULT_OUTPUT,
        pattern=pattern,
        priority=priority,
        json_file=str(json_file) if json_file is not None else None,
    )
