"""
Holder for the current reference snapshot.

Snapshots are immutable; refreshing swaps the whole object, so readers that
grabbed the previous snapshot keep a consistent view.
"""

import threading
from typing import Optional

import structlog

from .models import ReferenceSnapshot

logger = structlog.get_logger(__name__)


class SnapshotHolder:
    """Thread-safe slot for the active ReferenceSnapshot."""

    def __init__(self, snapshot: Optional[ReferenceSnapshot] = None):
        self._snapshot = snapshot
        self._lock = threading.RLock()

    @property
    def current(self) -> Optional[ReferenceSnapshot]:
        """The active snapshot, or None before the first load."""
        with self._lock:
            return self._snapshot

    @property
    def version(self) -> Optional[str]:
        snapshot = self.current
        return snapshot.version if snapshot is not None else None

    def replace(self, snapshot: ReferenceSnapshot) -> Optional[ReferenceSnapshot]:
        """
        Swap in a new snapshot.

        Args:
            snapshot: Fully built replacement

        Returns:
            The snapshot that was active before the swap
        """
        with self._lock:
            previous = self._snapshot
            self._snapshot = snapshot

        logger.info(
            "Reference snapshot replaced",
            previous_version=previous.version if previous else None,
            version=snapshot.version,
        )
        return previous
