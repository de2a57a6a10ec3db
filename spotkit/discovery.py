"""Zeroconf discovery endpoint: answers getInfo and receives users' credential blobs.

Other clients on the local network query this endpoint for device information. A
selected device receives an encrypted blob that is decrypted with a key shared
through Diffie-Hellman. The local key pair is supplied by the caller as an object
with ``public_key()`` and ``shared_secret(remote_public_key)`` methods, both
dealing in bytes.
"""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import json
import logging
import queue
import threading
from collections.abc import Mapping
from dataclasses import dataclass
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any, Protocol
from urllib.parse import parse_qsl, urlsplit

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

logger = logging.getLogger(__name__)

SERVICE_TYPE = "_spotify-connect._tcp"
TXT_RECORDS = ("VERSION=1.0", "CPath=/")

_IV_LEN = 16
_MAC_LEN = 20


class _LocalKeys(Protocol):
    def public_key(self) -> bytes: ...

    def shared_secret(self, remote_key: bytes) -> bytes: ...


class DiscoveryError(Exception):
    """Base class for discovery failures."""


class ParamsError(DiscoveryError):
    """A required request parameter is missing."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Missing params for key {key}")
        self.key = key


class HmacError(DiscoveryError):
    """The blob or key material is unusable for the checksum."""

    def __init__(self, data: bytes) -> None:
        super().__init__(f"Creating SHA1 HMAC failed for base key {list(data)!r}")
        self.data = bytes(data)


@dataclass
class DiscoveryConfig:
    device_id: str
    client_id: str
    name: str = "Spotkit"
    device_type: str = "Speaker"
    library_version: str = "0.1.0"


@dataclass(frozen=True)
class DiscoveredUser:
    """A user who selected this device, with the decrypted credential blob."""

    username: str
    blob: bytes
    device_id: str


def decrypt_blob(encrypted_blob: bytes, shared_key: bytes) -> bytes | None:
    """Verify and decrypt a blob laid out as IV, ciphertext and SHA1 MAC.

    Returns ``None`` when the checksum does not match.
    """
    if len(encrypted_blob) < _IV_LEN + _MAC_LEN:
        raise HmacError(encrypted_blob)
    iv = encrypted_blob[:_IV_LEN]
    encrypted = encrypted_blob[_IV_LEN:-_MAC_LEN]
    checksum = encrypted_blob[-_MAC_LEN:]

    base_key = hashlib.sha1(shared_key).digest()[:16]
    checksum_key = hmac.new(base_key, b"checksum", hashlib.sha1).digest()
    encryption_key = hmac.new(base_key, b"encryption", hashlib.sha1).digest()

    mac = hmac.new(checksum_key, encrypted, hashlib.sha1).digest()
    if not hmac.compare_digest(mac, checksum):
        return None

    decryptor = Cipher(algorithms.AES(encryption_key[:16]), modes.CTR(iv)).decryptor()
    return decryptor.update(encrypted) + decryptor.finalize()


def _b64decode(value: str) -> bytes:
    try:
        return base64.b64decode(value.encode(), validate=True)
    except (binascii.Error, ValueError) as e:
        raise DiscoveryError(f"invalid base64 value: {e}") from e


def _json(body: Mapping[str, Any]) -> bytes:
    return json.dumps(body, separators=(",", ":"), sort_keys=True).encode()


class RequestHandler:
    """Answers discovery requests; received users are put on ``received``."""

    def __init__(self, config: DiscoveryConfig, keys: _LocalKeys) -> None:
        self.config = config
        self.keys = keys
        self.username: str | None = None
        self.received: queue.Queue[DiscoveredUser] = queue.Queue()

    def get_info(self) -> bytes:
        """JSON body describing this device."""
        return _json(
            {
                "status": 101,
                "statusString": "OK",
                "spotifyError": 0,
                "version": "2.9.0",
                "deviceID": self.config.device_id,
                "deviceType": self.config.device_type,
                "remoteName": self.config.name,
                "publicKey": base64.b64encode(self.keys.public_key()).decode(),
                "brandDisplayName": "spotkit",
                "modelDisplayName": "spotkit",
                "libraryVersion": self.config.library_version,
                "resolverVersion": "1",
                "groupStatus": "NONE",
                "tokenType": "default",
                "clientID": self.config.client_id,
                "productID": 0,
                "scope": "streaming",
                "availability": "",
                "supported_drm_media_formats": [],
                "supported_capabilities": 1,
                "accountReq": "PREMIUM",
                "activeUser": self.username or "",
            }
        )

    def add_user(self, params: Mapping[str, str]) -> bytes:
        """Decrypt the user's blob, queue the user and return the JSON reply."""
        values = {}
        for key in ("userName", "blob", "clientKey"):
            if key not in params:
                raise ParamsError(key)
            values[key] = params[key]
        username = values["userName"]
        encrypted_blob = _b64decode(values["blob"])
        client_key = _b64decode(values["clientKey"])
        shared_key = self.keys.shared_secret(client_key)

        decrypted = decrypt_blob(encrypted_blob, shared_key)
        if decrypted is None:
            logger.warning("Login error for user %r: MAC mismatch", username)
            return _json({"status": 102, "spotifyError": 1, "statusString": "ERROR-MAC"})

        self.received.put(DiscoveredUser(username, decrypted, self.config.device_id))
        return _json({"status": 101, "spotifyError": 0, "statusString": "OK"})

    def handle(self, method: str, query: str, body: bytes) -> tuple[int, bytes]:
        """Route a request; returns the HTTP status and body."""
        params: dict[str, str] = dict(parse_qsl(query or "", keep_blank_values=True))
        if method != "GET":
            logger.debug("%s %r", method, params)
        params.update(parse_qsl(body.decode("utf-8", "replace"), keep_blank_values=True))

        action = params.get("action")
        if method == "GET" and action == "getInfo":
            return 200, self.get_info()
        if method == "POST" and action == "addUser":
            return 200, self.add_user(params)
        return 404, b""


class _HttpServer(ThreadingHTTPServer):
    daemon_threads = True

    def __init__(self, address: tuple[str, int], handler: RequestHandler) -> None:
        super().__init__(address, _HttpHandler)
        self.discovery = handler


class _HttpHandler(BaseHTTPRequestHandler):
    server: _HttpServer

    def _dispatch(self) -> None:
        split = urlsplit(self.path)
        length = int(self.headers.get("Content-Length") or 0)
        body = self.rfile.read(length) if length else b""
        try:
            status, payload = self.server.discovery.handle(self.command, split.query, body)
        except Exception as e:  # a failed request must not take the server down
            logger.error("could not handle discovery request: %s", e)
            status, payload = 500, b""
        self.send_response(status)
        if payload:
            self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(payload)))
        self.end_headers()
        self.wfile.write(payload)

    do_GET = _dispatch
    do_POST = _dispatch

    def log_message(self, format: str, *args: Any) -> None:
        logger.debug(format, *args)


class DiscoveryServer:
    """HTTP discovery endpoint running on a background thread."""

    def __init__(self, config: DiscoveryConfig, keys: _LocalKeys, port: int = 0) -> None:
        self.handler = RequestHandler(config, keys)
        self._http = _HttpServer(("0.0.0.0", port), self.handler)
        self.port: int = self._http.server_address[1]
        self._closed = False
        self._thread = threading.Thread(target=self._http.serve_forever, daemon=True)
        self._thread.start()
        logger.debug("Zeroconf server listening on 0.0.0.0:%d", self.port)

    def close(self) -> None:
        """Stop serving and release the port."""
        if self._closed:
            return
        self._closed = True
        logger.debug("Shutting down discovery server")
        self._http.shutdown()
        self._http.server_close()
        self._thread.join()

    def next_user(self, timeout: float | None = None) -> DiscoveredUser | None:
        """The next user who selected this device, or ``None`` on timeout or once closed."""
        if self._closed and self.handler.received.empty():
            return None
        try:
            return self.handler.received.get(timeout=timeout)
        except queue.Empty:
            return None

    def __enter__(self) -> DiscoveryServer:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()


class Builder:
    """Configures and starts a :class:`DiscoveryServer`."""

    def __init__(self, device_id: str, client_id: str) -> None:
        self.config = DiscoveryConfig(device_id=str(device_id), client_id=str(client_id))
        self._port = 0

    def name(self, name: str) -> Builder:
        """Name shown to other clients."""
        self.config.name = name
        return self

    def device_type(self, device_type: str) -> Builder:
        """Device type shown as an icon to other clients."""
        self.config.device_type = device_type
        return self

    def port(self, port: int) -> Builder:
        """Port to listen on; 0 picks any free port."""
        if not 0 <= port <= 0xFFFF:
            raise ValueError(f"port out of range: {port}")
        self._port = port
        return self

    def launch(self, keys: _LocalKeys) -> DiscoveryServer:
        """Start serving with the given local key pair."""
        try:
            return DiscoveryServer(self.config, keys, self._port)
        except OSError as e:
            raise DiscoveryError(f"Setting up the HTTP server failed: {e}") from e