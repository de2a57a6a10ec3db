"""Helpers for metadata requests over the message channel."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from spotkit.errors import EmptyResponseError

logger = logging.getLogger(__name__)


def metadata_uri(uri: str, country: str, product: str | None = None) -> str:
    """Append the user's country and, when known, product type to a request URI."""
    separator = "&" if "?" in uri else "?"
    result = f"{uri}{separator}country={country}"
    if product is not None:
        result += f"&product={product}"
    logger.debug("Requesting %s", result)
    return result


def first_payload(payloads: Sequence[bytes]) -> bytes:
    """Return the first payload of a response; raise if there is none."""
    if not payloads:
        raise EmptyResponseError()
    data = bytes(payloads[0])
    logger.debug("Received metadata: %r", data)
    return data