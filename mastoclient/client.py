"""The full API client."""

from __future__ import annotations

from .accounts import AccountsAPI
from .apps import AppsAPI
from .filters import FiltersAPI
from .instance import InstanceAPI
from .lists import ListsAPI


class Client(AccountsAPI, AppsAPI, FiltersAPI, ListsAPI, InstanceAPI):
    """A client for every supported endpoint; usable as a context manager."""

    def close(self) -> None:
        """Release the underlying HTTP session."""
        self.session.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()