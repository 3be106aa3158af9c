"""Session state: display unit, active location and the last snapshot.

``SessionState`` is the only owner of the current snapshot. It has exactly
two mutation paths, ``set_location`` and ``set_unit``; everything else reads
through properties.

Out-of-order fetch completions are handled with request tokens: callers take
a token with ``begin_request()`` before fetching and pass it back to
``set_location``. A completion carrying a token older than the last applied
one is discarded. A refresh of the current location passes ``refresh_of``,
the token that was applied when it started; it is dropped if any other
request has been applied since.
"""

from __future__ import annotations

import itertools
import logging
import threading
from typing import TYPE_CHECKING

from weather_dashboard.schemas import Unit

if TYPE_CHECKING:
    from weather_dashboard.schemas import Coordinates, NormalizedSnapshot

logger = logging.getLogger(__name__)


class SessionState:
    """Holds ``{unit, coordinates, label, snapshot}`` for one dashboard session."""

    def __init__(self, unit: Unit = Unit.CELSIUS) -> None:
        self._lock = threading.Lock()
        self._unit = unit
        self._coordinates: Coordinates | None = None
        self._label = ""
        self._snapshot: NormalizedSnapshot | None = None
        self._tokens = itertools.count(1)
        self._issued_request = 0
        self._applied_request = 0

    @property
    def unit(self) -> Unit:
        return self._unit

    @property
    def coordinates(self) -> Coordinates | None:
        return self._coordinates

    @property
    def label(self) -> str:
        return self._label

    @property
    def snapshot(self) -> NormalizedSnapshot | None:
        return self._snapshot

    @property
    def latest_request(self) -> int:
        """Most recently issued token (0 before any request)."""
        return self._issued_request

    @property
    def applied_request(self) -> int:
        """Token of the request whose result is currently shown."""
        return self._applied_request

    def begin_request(self) -> int:
        """Issue a token for a fetch that will later call ``set_location``."""
        with self._lock:
            self._issued_request = next(self._tokens)
            return self._issued_request

    def set_location(
        self,
        coordinates: Coordinates,
        label: str,
        snapshot: NormalizedSnapshot,
        *,
        request_id: int | None = None,
        refresh_of: int | None = None,
    ) -> bool:
        """
        Atomically replace coordinates, label and snapshot.

        Args:
            request_id: Token from ``begin_request``. When older than the
                last applied token the update is dropped.
            refresh_of: Applied token at the time a refresh started. The
                update is dropped unless that token is still the applied one.

        Returns:
            True if the state was replaced, False if the update was stale.
        """
        with self._lock:
            if refresh_of is not None and refresh_of != self._applied_request:
                logger.info(
                    "Discarding refresh for %s (request %d superseded by %d)",
                    label,
                    refresh_of,
                    self._applied_request,
                )
                return False
            if request_id is not None:
                if request_id < self._applied_request:
                    logger.info(
                        "Discarding stale result for %s (request %d < %d)",
                        label,
                        request_id,
                        self._applied_request,
                    )
                    return False
                self._applied_request = request_id
            self._coordinates = coordinates
            self._label = label
            self._snapshot = snapshot
        return True

    def set_unit(self, unit: Unit) -> None:
        """Change the display unit. The snapshot is left untouched."""
        with self._lock:
            self._unit = unit
