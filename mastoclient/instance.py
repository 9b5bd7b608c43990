"""Endpoints describing the instance itself."""

from __future__ import annotations

from .models import DomainBlock, Instance, WeeklyActivity
from .transport import BaseClient


class InstanceAPI(BaseClient):
    """Requests about the server instance."""

    def get_instance(self) -> Instance:
        """Return information about the instance."""
        return Instance.from_json(self.do_api("GET", "/api/v1/instance") or {})

    def get_instance_activity(self) -> list[WeeklyActivity]:
        """Return the weekly activity of the instance."""
        data = self.do_api("GET", "/api/v1/instance/activity")
        return [WeeklyActivity.from_json(item) for item in data or []]

    def get_instance_peers(self) -> list[str]:
        """Return the domains the instance is aware of."""
        return [str(peer) for peer in self.do_api("GET", "/api/v1/instance/peers") or []]

    def get_domain_blocks(self) -> list[DomainBlock]:
        """Return the domains blocked by the instance."""
        data = self.do_api("GET", "/api/v1/instance/domain_blocks")
        return [DomainBlock.from_json(item) for item in data or []]