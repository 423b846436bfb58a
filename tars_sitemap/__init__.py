from .entries import SitemapEntry, build_url, check, format_lastmod, load_static_entries, matches_pattern, resolve_metadata
from .options import ConfigurationError, SitemapOptions, resolve_options
from .pages import collect_pages, write_outputs
from .sitemap_generator import collect_entries, generate_sitemap, render_sitemap, sitemap
