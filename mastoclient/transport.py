"""HTTP plumbing shared by all API calls."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Union
from urllib.parse import parse_qs, urlsplit

import requests
from requests.utils import parse_header_links

from .helper import APIError, parse_api_error

Params = Union[Mapping[str, Any], Iterable[tuple]]


@dataclass
class Config:
    """Server address and credentials of a client."""

    server: str
    client_id: str = ""
    client_secret: str = ""
    access_token: str = ""


@dataclass
class Pagination:
    """Paging cursor; updated in place from each response's ``Link`` header."""

    max_id: str = ""
    since_id: str = ""
    min_id: str = ""
    limit: int = 0

    def to_params(self) -> dict[str, str]:
        """Return the query parameters for the set cursor values."""
        params: dict[str, str] = {}
        if self.max_id:
            params["max_id"] = self.max_id
        if self.since_id:
            params["since_id"] = self.since_id
        if self.min_id:
            params["min_id"] = self.min_id
        if self.limit > 0:
            params["limit"] = str(self.limit)
        return params

    def _apply_link_header(self, header: str) -> None:
        self.max_id = self.since_id = self.min_id = ""
        links = parse_header_links(header) if header else []
        for link in links:
            query = parse_qs(urlsplit(link.get("url", "")).query)
            rel = link.get("rel")
            if rel == "next":
                self.max_id = query.get("max_id", [""])[0]
            elif rel == "prev":
                self.since_id = query.get("since_id", [""])[0]
                self.min_id = query.get("min_id", [""])[0]


def _param_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _param_items(params: Optional[Params]) -> list[tuple[str, str]]:
    if params is None:
        return []
    pairs = params.items() if isinstance(params, Mapping) else params
    items: list[tuple[str, str]] = []
    for key, value in pairs:
        if isinstance(value, (list, tuple)):
            items.extend((key, _param_text(v)) for v in value)
        else:
            items.append((key, _param_text(value)))
    return items


class BaseClient:
    """Sends authenticated requests to the server and decodes the JSON replies."""

    def __init__(self, config: Config, session: Optional[requests.Session] = None) -> None:
        self.config = config
        self.session = session if session is not None else requests.Session()

    def _url(self, path: str) -> str:
        return self.config.server.rstrip("/") + "/" + path.lstrip("/")

    def do_api(
        self,
        method: str,
        path: str,
        params: Optional[Params] = None,
        pagination: Optional[Pagination] = None,
    ) -> Any:
        """Perform a request and return the decoded JSON body, or ``None`` if it is empty.

        GET parameters go in the query string, all others in a form body.
        Raises :class:`APIError` for any status other than 200.
        """
        method = method.upper()
        items = _param_items(params)
        if pagination is not None:
            items.extend(pagination.to_params().items())
        headers = {}
        if self.config.access_token:
            headers["Authorization"] = f"Bearer {self.config.access_token}"
        payload = {"params": items} if method == "GET" else {"data": items}
        response = self.session.request(method, self._url(path), headers=headers, **payload)
        try:
            if response.status_code != 200:
                raise parse_api_error("bad request", response)
            if pagination is not None:
                pagination._apply_link_header(response.headers.get("Link", ""))
            text = response.text.strip()
            if not text:
                return None
            try:
                return json.loads(text)
            except ValueError as exc:
                raise APIError(f"invalid JSON in response: {exc}", response.status_code) from exc
        finally:
            response.close()