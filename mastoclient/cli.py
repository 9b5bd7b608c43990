"""Command line for querying an instance and searching posts."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence, TextIO

import requests

from .client import Client
from .helper import APIError
from .transport import Config
from .xsearch import mikami, x_search


def show_instance(client: Client, out: TextIO) -> None:
    instance = client.get_instance()
    out.write(f"URI        : {instance.uri}\n")
    out.write(f"Title      : {instance.title}\n")
    out.write(f"Description: {instance.description}\n")
    out.write(f"EMail      : {instance.email}\n")
    if instance.version:
        out.write(f"Version    : {instance.version}\n")
    if instance.thumbnail:
        out.write(f"Thumbnail  : {instance.thumbnail}\n")
    for key in sorted(instance.urls or {}):
        out.write(f"{key}: {instance.urls[key]}\n")
    if instance.stats is not None:
        out.write(f"User Count   : {instance.stats.user_count}\n")
        out.write(f"Status Count : {instance.stats.status_count}\n")
        out.write(f"Domain Count : {instance.stats.domain_count}\n")


def show_instance_activity(client: Client, out: TextIO) -> None:
    for activity in client.get_instance_activity():
        out.write(f"Logins        : {activity.logins}\n")
        out.write(f"Registrations : {activity.registrations}\n")
        out.write(f"Statuses      : {activity.statuses}\n")
        out.write(f"Week          : {activity.week}\n")


def show_instance_peers(client: Client, out: TextIO) -> None:
    for peer in client.get_instance_peers():
        out.write(f"{peer}\n")


_CLIENT_COMMANDS = {
    "instance": show_instance,
    "instance-activity": show_instance_activity,
    "instance-peers": show_instance_peers,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line and return the exit status."""
    parser = argparse.ArgumentParser(prog="mastoclient")
    parser.add_argument("--server", default="")
    parser.add_argument("--access-token", default="")
    parser.add_argument("--xsearch-url", default="")
    commands = parser.add_subparsers(dest="command", required=True)
    for name in (*_CLIENT_COMMANDS, "mikami"):
        commands.add_parser(name)
    commands.add_parser("xsearch").add_argument("query", nargs="?", default="")
    args = parser.parse_args(argv)

    try:
        if args.command in ("xsearch", "mikami"):
            if not args.xsearch_url:
                parser.error("--xsearch-url is required for this command")
            if args.command == "xsearch":
                x_search(args.xsearch_url, args.query, sys.stdout)
            else:
                mikami(args.xsearch_url, sys.stdout)
            return 0
        if not args.server:
            parser.error("--server is required for this command")
        with Client(Config(server=args.server, access_token=args.access_token)) as client:
            _CLIENT_COMMANDS[args.command](client, sys.stdout)
    except (APIError, requests.RequestException, ValueError) as exc:
        print(f"mastoclient: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())