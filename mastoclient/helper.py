"""API errors, content sniffing and data-URI encoding."""

from __future__ import annotations

import base64
import http
import os
from typing import BinaryIO, Union

import requests

_WHITESPACE = b"\t\n\x0c\r "
_HTML_TAGS = (
    b"<!DOCTYPE HTML", b"<HTML", b"<HEAD", b"<SCRIPT", b"<IFRAME", b"<H1",
    b"<DIV", b"<FONT", b"<TABLE", b"<A", b"<STYLE", b"<TITLE", b"<B",
    b"<BODY", b"<BR", b"<P", b"<!--",
)
_PREFIXES = (
    (b"%PDF-", "application/pdf"),
    (b"\xef\xbb\xbf", "text/plain; charset=utf-8"),
    (b"BM", "image/bmp"),
    (b"GIF87a", "image/gif"),
    (b"GIF89a", "image/gif"),
    (b"\x89PNG\r\n\x1a\n", "image/png"),
    (b"\xff\xd8\xff", "image/jpeg"),
    (b"\x1f\x8b\x08", "application/x-gzip"),
    (b"PK\x03\x04", "application/zip"),
)
_BINARY = frozenset([*range(0x09), 0x0B, *range(0x0E, 0x1B), *range(0x1C, 0x20)])


class APIError(Exception):
    """An error reported by the server or found in its response."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def detect_content_type(data: bytes) -> str:
    """Guess the MIME type of ``data`` from its first 512 bytes."""
    head = bytes(data[:512])
    stripped = head.lstrip(_WHITESPACE)
    upper = stripped.upper()
    for tag in _HTML_TAGS:
        if upper.startswith(tag) and stripped[len(tag):len(tag) + 1] in (b" ", b">"):
            return "text/html; charset=utf-8"
    if stripped.startswith(b"<?xml"):
        return "text/xml; charset=utf-8"
    for prefix, mime in _PREFIXES:
        if head.startswith(prefix):
            return mime
    if head[:4] == b"RIFF" and head[8:14] == b"WEBPVP":
        return "image/webp"
    if any(byte in _BINARY for byte in head):
        return "application/octet-stream"
    return "text/plain; charset=utf-8"


def base64_encode(data: Union[bytes, bytearray, BinaryIO]) -> str:
    """Return the contents as a base64 ``data:`` URI with a sniffed MIME type."""
    raw = bytes(data) if isinstance(data, (bytes, bytearray)) else data.read()
    return f"data:{detect_content_type(raw)};base64,{base64.b64encode(raw).decode('ascii')}"


def base64_encode_file(filename: Union[str, os.PathLike]) -> str:
    """Return the contents of the named file as a base64 ``data:`` URI."""
    with open(filename, "rb") as file:
        return base64_encode(file.read())


def parse_api_error(prefix: str, response: requests.Response) -> APIError:
    """Build an :class:`APIError` from a failed response."""
    reason = response.reason
    if not reason:
        try:
            reason = http.HTTPStatus(response.status_code).phrase
        except ValueError:
            reason = ""
    message = f"{prefix}: {response.status_code} {reason}".rstrip()
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and isinstance(body.get("error"), str) and body["error"]:
        message = f"{message}: {body['error']}"
    return APIError(message, response.status_code)