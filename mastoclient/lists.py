"""Endpoints for lists of followed accounts."""

from __future__ import annotations

from typing import Optional

from .accounts import _path_escape
from .models import Account, UserList
from .transport import BaseClient, Pagination


class ListsAPI(BaseClient):
    """Requests about the current user's lists."""

    def get_lists(self) -> list[UserList]:
        return [UserList.from_json(item) for item in self.do_api("GET", "/api/v1/lists") or []]

    def get_account_lists(self, id: str) -> list[UserList]:
        data = self.do_api("GET", f"/api/v1/accounts/{_path_escape(id)}/lists")
        return [UserList.from_json(item) for item in data or []]

    def get_list_accounts(self, id: str, pagination: Optional[Pagination] = None) -> list[Account]:
        data = self.do_api("GET", f"/api/v1/lists/{_path_escape(id)}/accounts", None, pagination)
        return [Account.from_json(item) for item in data or []]

    def get_list(self, id: str) -> UserList:
        return UserList.from_json(self.do_api("GET", f"/api/v1/lists/{_path_escape(id)}") or {})

    def create_list(self, title: str) -> UserList:
        return UserList.from_json(self.do_api("POST", "/api/v1/lists", {"title": title}) or {})

    def rename_list(self, id: str, title: str) -> UserList:
        data = self.do_api("PUT", f"/api/v1/lists/{_path_escape(id)}", {"title": title})
        return UserList.from_json(data or {})

    def delete_list(self, id: str) -> None:
        self.do_api("DELETE", f"/api/v1/lists/{_path_escape(id)}")

    def add_to_list(self, list_id: str, *args: str) -> None:
        """Add accounts to a list; only followed accounts can be added."""
        params = [("account_ids", str(account)) for account in args]
        self.do_api("POST", f"/api/v1/lists/{_path_escape(list_id)}/accounts", params)

    def remove_from_list(self, list_id: str, *args: str) -> None:
        params = [("account_ids", str(account)) for account in args]
        self.do_api("DELETE", f"/api/v1/lists/{_path_escape(list_id)}/accounts", params)