from __future__ import annotations

import logging
import threading
from typing import Callable, Optional


logger = logging.getLogger(__name__)

DEFAULT_DELAY_S = 1.5


class DeferredMove:
    """Cancellable handle for a single callback run after a fixed delay.

    Notes:
    - Backed by a daemon ``threading.Timer``; nothing blocks until ``wait``.
    - ``cancel`` is idempotent. Once it returns, the callback will not start.
    """

    def __init__(self, delay_s: float, callback: Callable[[], None]) -> None:
        if delay_s < 0:
            raise ValueError("delay must be >= 0")
        self.delay_s = delay_s
        self._callback = callback
        self._lock = threading.Lock()
        self._done = threading.Event()
        self._timer: Optional[threading.Timer] = None
        self._cancelled = False
        self._fired = False
        self.error: Optional[BaseException] = None

    def start(self) -> "DeferredMove":
        with self._lock:
            if self._timer is not None or self._cancelled:
                return self
            self._timer = threading.Timer(self.delay_s, self._run)
            self._timer.name = "deferred-move"
            self._timer.daemon = True
            self._timer.start()
        return self

    def cancel(self) -> None:
        with self._lock:
            if self._fired or self._cancelled:
                return
            self._cancelled = True
            timer = self._timer
        if timer is not None:
            timer.cancel()
        logger.debug("deferred move cancelled")
        self._done.set()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until the callback has run or the handle was cancelled.

        Returns:
            bool: ``True`` if the handle settled within ``timeout``.
        """
        return self._done.wait(timeout)

    @property
    def fired(self) -> bool:
        return self._fired

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def _run(self) -> None:
        with self._lock:
            if self._cancelled:
                return
            self._fired = True
        try:
            self._callback()
        except Exception as exc:
            self.error = exc
            logger.exception("deferred move callback failed")
        finally:
            self._done.set()
