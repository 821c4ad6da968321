"""HTTP client construction and response checking shared by the API clients."""

from __future__ import annotations

import logging
import os
import ssl
from collections.abc import Collection
from typing import Any

import httpx

logger = logging.getLogger(__name__)

SOCKS5_ENV = "SOCKS5"


class OchamiClientError(Exception):
    """Base class for every error raised by this package."""


class NetError(OchamiClientError):
    """The request could not be made or its answer could not be decoded."""


class ApiError(OchamiClientError):
    """The backend answered with a failure status and a JSON payload."""

    def __init__(self, payload: Any) -> None:
        super().__init__(payload)
        self.payload = payload


class MessageError(OchamiClientError):
    """A failure described by a plain message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class RequestError(OchamiClientError):
    """The backend refused the request; the body was kept as text."""

    def __init__(self, status_code: int, payload: str) -> None:
        super().__init__(f"HTTP {status_code}: {payload}")
        self.status_code = status_code
        self.payload = payload


def _ssl_context(root_cert: bytes | str | None) -> ssl.SSLContext:
    context = ssl.create_default_context()
    if root_cert:
        pem = root_cert.decode() if isinstance(root_cert, bytes) else root_cert
        context.load_verify_locations(cadata=pem)
    return context


def build_client(root_cert: bytes | str | None) -> httpx.AsyncClient:
    """Build an async client trusting ``root_cert`` and honouring ``$SOCKS5``.

    ``root_cert`` is a PEM certificate added to the default trust store;
    an empty value adds nothing.
    """
    try:
        context = _ssl_context(root_cert)
    except (ssl.SSLError, ValueError, UnicodeDecodeError) as error:
        raise NetError(f"invalid root certificate: {error}") from error

    proxy = os.environ.get(SOCKS5_ENV)
    if proxy is not None:
        logger.debug("SOCKS5 enabled")
    try:
        return httpx.AsyncClient(verify=context, proxy=proxy)
    except (ValueError, ImportError) as error:
        raise NetError(f"could not build HTTP client: {error}") from error


def check_response(
    response: httpx.Response, text_statuses: Collection[int] = ()
) -> httpx.Response:
    """Return ``response`` if it succeeded, otherwise raise the matching error.

    Failures whose status is in ``text_statuses`` raise :class:`RequestError`
    with the body as text; other failures raise :class:`ApiError` with the
    decoded JSON body, or :class:`NetError` if the body is not JSON.
    """
    if response.is_success:
        return response
    if response.status_code in text_statuses:
        raise RequestError(response.status_code, response.text)
    try:
        payload = response.json()
    except ValueError as error:
        raise NetError(
            f"HTTP {response.status_code} with undecodable body: {error}"
        ) from error
    raise ApiError(payload)