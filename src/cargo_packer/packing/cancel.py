from __future__ import annotations

import threading


class PackingCancelled(RuntimeError):
    """Raised inside a packing run once its CancelToken is set."""


class CancelToken:
    """Thread-safe flag polled by the scanner once per z-layer."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise PackingCancelled("packing run cancelled")
