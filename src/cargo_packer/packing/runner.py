"""Run packing jobs off the caller's thread, with cancellation."""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Iterable

from cargo_packer.models import BoxSpec, Container, PackingResult
from cargo_packer.packing.cancel import CancelToken, PackingCancelled
from cargo_packer.packing.first_fit import pack_boxes

logger = logging.getLogger(__name__)

__all__ = ["CancelToken", "PackingCancelled", "PackingJob", "PackingWorker"]


@dataclass
class PackingJob:
    """Handle to a submitted run. `future` resolves to a PackingResult."""

    future: Future
    token: CancelToken = field(default_factory=CancelToken)

    def cancel(self) -> None:
        """Stop the run at its next z-layer; the future then raises PackingCancelled."""
        self.token.cancel()
        self.future.cancel()

    def result(self, timeout: float | None = None) -> PackingResult:
        return self.future.result(timeout=timeout)


class PackingWorker:
    """Thread pool that owns packing runs. Use as a context manager or call shutdown()."""

    def __init__(self, max_workers: int = 2) -> None:
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="packer")

    def submit(self, container: Container, specs: Iterable[BoxSpec]) -> PackingJob:
        specs = list(specs)
        token = CancelToken()
        future = self._executor.submit(self._run, container, specs, token)
        return PackingJob(future=future, token=token)

    @staticmethod
    def _run(container: Container, specs: list[BoxSpec], token: CancelToken) -> PackingResult:
        try:
            return pack_boxes(container, specs, cancel=token)
        except PackingCancelled:
            logger.info("packing job cancelled")
            raise

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

    def __enter__(self) -> "PackingWorker":
        return self

    def __exit__(self, *exc) -> None:
        self.shutdown()
