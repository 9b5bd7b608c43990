"""Account endpoints."""

from __future__ import annotations

from typing import Any, Iterable, Optional
from urllib.parse import quote

from .models import Account, Profile, Relationship
from .transport import BaseClient, Pagination


def _path_escape(segment: Any) -> str:
    """Escape a value for use as one URL path segment."""
    return quote(str(segment), safe="$&+,:;=@")


def _accounts(data: Any) -> list[Account]:
    return [Account.from_json(item) for item in data or []]


class AccountsAPI(BaseClient):
    """Requests about accounts and relations to them."""

    def _account_path(self, id: str, suffix: str = "") -> str:
        return f"/api/v1/accounts/{_path_escape(id)}{suffix}"

    def get_account(self, id: str) -> Account:
        return Account.from_json(self.do_api("GET", self._account_path(id)) or {})

    def get_account_current_user(self) -> Account:
        return Account.from_json(self.do_api("GET", "/api/v1/accounts/verify_credentials") or {})

    def account_update(self, profile: Profile) -> Account:
        data = self.do_api("PATCH", "/api/v1/accounts/update_credentials", profile.to_params())
        return Account.from_json(data or {})

    def get_account_statuses(self, id: str, pagination: Optional[Pagination] = None) -> list[dict]:
        """Return an account's statuses as decoded JSON objects."""
        return list(self.do_api("GET", self._account_path(id, "/statuses"), None, pagination) or [])

    def get_account_pinned_statuses(self, id: str) -> list[dict]:
        return list(self.do_api("GET", self._account_path(id, "/statuses"), {"pinned": "true"}) or [])

    def get_account_followers(self, id: str, pagination: Optional[Pagination] = None) -> list[Account]:
        return _accounts(self.do_api("GET", self._account_path(id, "/followers"), None, pagination))

    def get_account_following(self, id: str, pagination: Optional[Pagination] = None) -> list[Account]:
        return _accounts(self.do_api("GET", self._account_path(id, "/following"), None, pagination))

    def get_blocks(self, pagination: Optional[Pagination] = None) -> list[Account]:
        return _accounts(self.do_api("GET", "/api/v1/blocks", None, pagination))

    def _relationship(self, id: str, action: str) -> Relationship:
        return Relationship.from_json(self.do_api("POST", self._account_path(id, f"/{action}")) or {})

    def account_follow(self, id: str) -> Relationship:
        return self._relationship(id, "follow")

    def account_unfollow(self, id: str) -> Relationship:
        return self._relationship(id, "unfollow")

    def account_block(self, id: str) -> Relationship:
        return self._relationship(id, "block")

    def account_unblock(self, id: str) -> Relationship:
        return self._relationship(id, "unblock")

    def account_mute(self, id: str) -> Relationship:
        return self._relationship(id, "mute")

    def account_unmute(self, id: str) -> Relationship:
        return self._relationship(id, "unmute")

    def get_account_relationships(self, ids: Iterable[str]) -> list[Relationship]:
        data = self.do_api("GET", "/api/v1/accounts/relationships", [("id[]", i) for i in ids])
        return [Relationship.from_json(item) for item in data or []]

    def accounts_search(self, q: str, limit: int, offset: int = 0,
                        resolve: bool = False, following: bool = False) -> list[Account]:
        params = {"q": q, "limit": limit, "offset": offset,
                  "resolve": resolve, "following": following}
        return _accounts(self.do_api("GET", "/api/v1/accounts/search", params))

    def follow_remote_user(self, uri: str) -> Account:
        return Account.from_json(self.do_api("POST", "/api/v1/follows", {"uri": uri}) or {})

    def get_follow_requests(self, pagination: Optional[Pagination] = None) -> list[Account]:
        return _accounts(self.do_api("GET", "/api/v1/follow_requests", None, pagination))

    def follow_request_authorize(self, id: str) -> None:
        self.do_api("POST", f"/api/v1/follow_requests/{_path_escape(id)}/authorize")

    def follow_request_reject(self, id: str) -> None:
        self.do_api("POST", f"/api/v1/follow_requests/{_path_escape(id)}/reject")

    def get_mutes(self, pagination: Optional[Pagination] = None) -> list[Account]:
        return _accounts(self.do_api("GET", "/api/v1/mutes", None, pagination))