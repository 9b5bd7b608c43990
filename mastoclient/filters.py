"""Keyword filter endpoints."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from .accounts import _path_escape
from .models import Filter
from .transport import BaseClient


def _expires_in(expires_at: datetime) -> str:
    if expires_at.tzinfo is None:
        expires_at = expires_at.astimezone()
    return f"{(expires_at - datetime.now(timezone.utc)).total_seconds():.0f}"


def _base_params(filter: Filter) -> list[tuple[str, str]]:
    if not filter.phrase:
        raise ValueError("phrase can't be empty")
    if not filter.context:
        raise ValueError("context can't be empty")
    return [("phrase", filter.phrase), *(("context[]", c) for c in filter.context)]


class FiltersAPI(BaseClient):
    """Requests about the current account's keyword filters."""

    def get_filters(self) -> list[Filter]:
        return [Filter.from_json(item) for item in self.do_api("GET", "/api/v1/filters") or []]

    def get_filter(self, id: str) -> Filter:
        return Filter.from_json(self.do_api("GET", f"/api/v1/filters/{_path_escape(id)}") or {})

    def create_filter(self, filter: Optional[Filter]) -> Filter:
        """Create a filter; unset flags and expiry are left out."""
        if filter is None:
            raise ValueError("filter can't be None")
        params = _base_params(filter)
        if filter.whole_word:
            params.append(("whole_word", "true"))
        if filter.irreversible:
            params.append(("irreversible", "true"))
        if filter.expires_at is not None:
            params.append(("expires_in", _expires_in(filter.expires_at)))
        return Filter.from_json(self.do_api("POST", "/api/v1/filters", params) or {})

    def update_filter(self, id: str, filter: Optional[Filter]) -> Filter:
        """Replace a filter; every field is sent, an empty expiry clears it."""
        if filter is None:
            raise ValueError("filter can't be None")
        if not id:
            raise ValueError("ID can't be empty")
        params = _base_params(filter)
        params += [
            ("whole_word", "true" if filter.whole_word else "false"),
            ("irreversible", "true" if filter.irreversible else "false"),
            ("expires_in", "" if filter.expires_at is None else _expires_in(filter.expires_at)),
        ]
        return Filter.from_json(self.do_api("PUT", f"/api/v1/filters/{_path_escape(id)}", params) or {})

    def delete_filter(self, id: str) -> None:
        self.do_api("DELETE", f"/api/v1/filters/{_path_escape(id)}")