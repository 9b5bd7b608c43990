"""Full-text search of posts through an external search page."""

from __future__ import annotations

import sys
from typing import Optional, TextIO
from urllib.parse import urlencode, urlsplit

import requests
from bs4 import BeautifulSoup

MIKAMI_QUERY = "三上"


def x_search(xsearch_url: str, query: str, out: Optional[TextIO] = None) -> None:
    """Write the link and text of each post matching ``query``; posts without a link are skipped."""
    parts = urlsplit(xsearch_url)
    if not parts.scheme or not parts.netloc:
        raise ValueError(f"invalid search URL: {xsearch_url!r}")
    with requests.get(parts._replace(query=urlencode({"q": query})).geturl()) as response:
        charset = "charset=" in response.headers.get("Content-Type", "").lower()
        document = BeautifulSoup(response.content, "html.parser",
                                 from_encoding=response.encoding if charset else None)
    writer = out if out is not None else sys.stdout
    for post in document.select(".post"):
        link = post.select_one(".mst_content a")
        if link is None or link.get("href") is None:
            continue
        text = "".join(p.get_text() for p in post.select(".mst_content p"))
        writer.write(f"{link['href']}\n{text}\n\n")


def mikami(xsearch_url: str, out: Optional[TextIO] = None) -> None:
    """Search posts that mention Mikami."""
    x_search(xsearch_url, MIKAMI_QUERY, out)