# Tars sitemap generator
# Copyright (C) 2025-6, Nathan Gill
# Licensed under the MIT license
# See LICENSE_MIT for details

import os
from pathlib import Path

import frontmatter


def src_to_page(src, content_dir):
    p = Path(src).with_suffix(".html")
    return p.relative_to(content_dir).as_posix()


def collect_pages(content_dir):
    """Map every Markdown source's output page to its frontmatter."""
    content_dir = Path(content_dir)
    pages = {}

    for root, dirs, files in os.walk(content_dir):
        dirs.sort()
        for f in sorted(files):
            if not f.endswith(".md"):
                continue

            src = os.path.join(root, f)
            with open(src, encoding="utf-8") as fh:
                meta, _ = frontmatter.parse(fh.read())

            pages[src_to_page(src, content_dir)] = meta

    return pages


def write_outputs(files, build_dir, keys):
    build_dir = Path(build_dir)
    written = []

    for key in keys:
        out = build_dir / key
        out.parent.mkdir(parents=True, exist_ok=True)
        with open(out, "wb") as f:
            f.write(files[key]["contents"])
        written.append(out)

    return written
