# Tars sitemap generator
# Copyright (C) 2025-6, Nathan Gill
# Licensed under the MIT license
# See LICENSE_MIT for details

import logging
from urllib.parse import urlparse
from xml.dom import minidom

from .entries import build_entry, check, load_static_entries
from .options import resolve_options

logger = logging.getLogger(__name__)

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
XSI_NS = "http://www.w3.org/2001/XMLSchema-instance"


def format_priority(priority):
    return format(priority, "g")


def entry_to_loc(hostname, url):
    if not url:
        return ""

    parsed = urlparse(url)
    if parsed.scheme and parsed.netloc:
        return url

    return hostname.rstrip("/") + "/" + url.lstrip("/")


def collect_entries(files, options):
    entries = []

    for path, record in files.items():
        if not check(path, record, options):
            logger.debug(f"Skipping {path}")
            continue

        entry = build_entry(path, record, options)
        logger.debug(f"Including {path} as {entry.url}")
        entries.append(entry)

    if options.json_file:
        entries.extend(load_static_entries(options.json_file, options))

    return entries


def generate_sitemap(hostname, entries):
    doc = minidom.Document()

    urlset = doc.createElement("urlset")
    urlset.setAttribute("xmlns", SITEMAP_NS)
    urlset.setAttribute("xmlns:xsi", XSI_NS)
    urlset.setAttribute("xsi:schemaLocation", f"{SITEMAP_NS} {SITEMAP_NS}/sitemap.xsd")

    for entry in entries:
        url = doc.createElement("url")

        loc = doc.createElement("loc")
        loc.appendChild(doc.createTextNode(entry_to_loc(hostname, entry.url)))
        url.appendChild(loc)

        children = [
            ("lastmod", entry.lastmod),
            ("changefreq", entry.changefreq),
            ("priority", None if entry.priority is None else format_priority(entry.priority)),
        ]

        for name, value in children:
            if value is None:
                continue
            el = doc.createElement(name)
            el.appendChild(doc.createTextNode(str(value)))
            url.appendChild(el)

        urlset.appendChild(url)

    doc.appendChild(urlset)

    return doc


def render_sitemap(hostname, entries):
    return generate_sitemap(hostname, entries).toxml(encoding="UTF-8")


def sitemap(opts):
    """
    Create the sitemap build step.

    Options are checked here, so a bad configuration fails before any
    files are processed. The returned plugin adds the rendered sitemap
    to the file mapping under the configured output path.
    """
    options = resolve_options(opts)

    def plugin(files):
        entries = collect_entries(files, options)

        files[options.output] = {
            "contents": render_sitemap(options.hostname, entries),
        }

        logger.info(f"Generated {options.output} with {len(entries)} URLs")
        return files

    return plugin
