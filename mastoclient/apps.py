"""Registering applications and checking their credentials."""

from __future__ import annotations

import posixpath
from dataclasses import dataclass
from typing import Optional
from urllib.parse import SplitResult, urlencode, urlsplit

import requests

from .helper import APIError, parse_api_error
from .models import Application, ApplicationVerification
from .transport import BaseClient

OUT_OF_BAND_REDIRECT = "urn:ietf:wg:oauth:2.0:oob"


@dataclass
class AppConfig:
    """Settings for registering an application; empty redirect means out-of-band."""

    server: str
    client_name: str = ""
    redirect_uris: str = ""
    scopes: str = ""
    website: str = ""
    session: Optional[requests.Session] = None


def _with_path(server: str, suffix: str) -> SplitResult:
    parts = urlsplit(server)
    if not parts.scheme or not parts.netloc:
        raise ValueError(f"invalid server URL: {server!r}")
    return parts._replace(path=posixpath.normpath(posixpath.join("/", parts.path, suffix.lstrip("/"))))


def register_app(app_config: AppConfig) -> Application:
    """Register an application and fill in its authorization URI."""
    form = {
        "client_name": app_config.client_name,
        "redirect_uris": app_config.redirect_uris or OUT_OF_BAND_REDIRECT,
        "scopes": app_config.scopes,
        "website": app_config.website,
    }
    endpoint = _with_path(app_config.server, "/api/v1/apps").geturl()
    requester = app_config.session or requests
    with requester.post(endpoint, data=form) as response:
        if response.status_code != 200:
            raise parse_api_error("bad request", response)
        try:
            data = response.json()
        except ValueError as exc:
            raise APIError(f"invalid JSON in response: {exc}", response.status_code) from exc
    if not isinstance(data, dict):
        raise APIError("unexpected application response")

    app = Application.from_json(data)
    query = urlencode([("client_id", app.client_id), ("redirect_uri", app.redirect_uri),
                       ("response_type", "code"), ("scope", app_config.scopes)])
    app.auth_uri = _with_path(app_config.server, "/oauth/authorize")._replace(query=query).geturl()
    return app


class AppsAPI(BaseClient):
    """Requests about the application behind the access token."""

    def verify_app_credentials(self) -> ApplicationVerification:
        return ApplicationVerification.from_json(
            self.do_api("GET", "/api/v1/apps/verify_credentials") or {})