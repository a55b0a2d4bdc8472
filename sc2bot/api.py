"""Request/response exchange with the game over a websocket connection."""

from __future__ import annotations

import threading
from typing import Any, Callable


def _encode(request: Any) -> bytes:
    if isinstance(request, (bytes, bytearray, memoryview)):
        return bytes(request)
    serialize = getattr(request, "SerializeToString", None)
    if callable(serialize):
        return serialize()
    raise TypeError(f"cannot serialize request of type {type(request).__name__}")


class API:
    """Sends binary requests and reads responses, one exchange at a time.

    ``connection`` needs ``send_binary(data)``, ``recv()`` and ``close()``;
    ``response_factory`` turns the received bytes into a response.
    """

    def __init__(
        self, connection: Any, response_factory: Callable[[bytes], Any] = bytes
    ) -> None:
        self._connection = connection
        self._response_factory = response_factory
        self._lock = threading.Lock()

    def _read(self) -> Any:
        message = self._connection.recv()
        if isinstance(message, str):
            message = message.encode()
        return self._response_factory(bytes(message))

    def send(self, request: Any) -> Any:
        """Send a request and return its response."""
        data = _encode(request)
        with self._lock:
            self._connection.send_binary(data)
            return self._read()

    def send_request(self, request: Any) -> None:
        """Send a request and wait for its response, discarding it."""
        data = _encode(request)
        with self._lock:
            self._connection.send_binary(data)
            self._connection.recv()

    def send_only(self, request: Any) -> None:
        """Send a request without waiting for the response."""
        data = _encode(request)
        with self._lock:
            self._connection.send_binary(data)

    def wait_response(self) -> Any:
        """Wait for a response, typically after :meth:`send_only`."""
        with self._lock:
            return self._read()

    def close(self) -> None:
        """Close the underlying connection."""
        with self._lock:
            self._connection.close()

    def __enter__(self) -> API:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()