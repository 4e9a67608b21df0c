# src/seo_auditor/site.py
import logging
from pathlib import Path
from typing import Iterable, List, Union

from .model import Page

logger = logging.getLogger(__name__)

HTML_SUFFIXES = {".html", ".htm"}


def path_to_url(relative: Path) -> str:
    """
    Maps a file path below the site root to the URL it is served at.

    'index.html' maps to its directory ('/', '/blog/'); other files keep
    their name ('/404.html').
    """
    parts = list(relative.parts)
    if parts and parts[-1] in ("index.html", "index.htm"):
        parts = parts[:-1]
        return "/" + "".join(f"{part}/" for part in parts)
    return "/" + "/".join(parts)


def load_site(root: Union[str, Path], extensions: Iterable[str]) -> List[Page]:
    """
    Reads every rendered page below `root` whose suffix is in `extensions`.

    Files are visited in sorted order so reports are reproducible. Matching
    files that are not HTML are skipped.
    """
    root = Path(root)
    if not root.is_dir():
        raise NotADirectoryError(f"Site directory not found: {root}")

    wanted = {ext.lower() for ext in extensions}
    pages: List[Page] = []

    for path in sorted(p for p in root.rglob("*") if p.is_file()):
        suffix = path.suffix.lower()
        if suffix not in wanted:
            continue
        if suffix not in HTML_SUFFIXES:
            logger.debug(f"Skipping non-HTML file {path}")
            continue

        html = path.read_text(encoding="utf-8", errors="replace")
        url = path_to_url(path.relative_to(root))
        pages.append(Page.from_html(url, html, src_ext=suffix))

    logger.info(f"Loaded {len(pages)} page(s) from {root}")
    return pages
