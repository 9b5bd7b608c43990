"""Client library for the Mastodon REST API, with a command line for instance information and post search."""

__version__ = "0.1.0"