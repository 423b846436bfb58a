#!/usr/bin/env python3

# Tars sitemap generator
# Copyright (C) 2025-6, Nathan Gill
# Licensed under the MIT license
# See LICENSE_MIT for details

import argparse
import sys
import time
from pathlib import Path

from .options import ConfigurationError
from .pages import collect_pages, write_outputs
from .sitemap_generator import sitemap

CONTENT_DIR = Path("content")
BUILD_DIR = Path("build")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="tars-sitemap", description="Generate sitemap.xml for a built site")
    parser.add_argument("hostname", help="Site URL, e.g. https://nathanjgill.uk")
    parser.add_argument("--content", type=Path, default=CONTENT_DIR, help="Markdown source directory")
    parser.add_argument("--build", type=Path, default=BUILD_DIR, help="Build output directory")
    parser.add_argument("--output", help="Sitemap path relative to the build directory")
    parser.add_argument("--pattern", action="append", help="Glob of pages to include, prefix with ! to exclude")
    parser.add_argument("--changefreq")
    parser.add_argument("--priority")
    parser.add_argument("--lastmod", help="Default lastmod date")
    parser.add_argument("--omit-extension", action="store_true")
    parser.add_argument("--omit-index", action="store_true")
    parser.add_argument("--json-file", help="JSON list of extra {path, changefreq, priority, lastmod} entries")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    print("\nRunning sitemap generator...")

    opts = {
        "hostname": args.hostname,
        "changefreq": args.changefreq,
        "lastmod": args.lastmod,
        "omitExtension": args.omit_extension,
        "omitIndex": args.omit_index,
        "output": args.output,
        "pattern": args.pattern,
        "priority": args.priority,
        "jsonFile": args.json_file,
    }

    try:
        plugin = sitemap(opts)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    start = time.perf_counter()

    files = collect_pages(args.content)
    count = len(files)
    before = set(files)
    files = plugin(files)

    end = time.perf_counter()

    for out in write_outputs(files, args.build, [k for k in files if k not in before]):
        print(f"Generated {out}")

    print(f"Generated sitemap from {count} pages in {end - start:.4f} seconds")
    return 0


if __name__ == "__main__":
    sys.exit(main())
