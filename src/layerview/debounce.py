"""Timer-based debouncing for bursts of input events."""

import threading
from typing import Any, Callable, Optional


class Debouncer:
    """
    Delay ``callback`` until calls stop arriving for ``delay`` seconds.

    Each call cancels the pending one and schedules the callback again with
    the latest arguments, so a burst of calls fires the callback once.
    """

    def __init__(self, callback: Callable[..., Any], delay: float = 0.5) -> None:
        if delay < 0:
            raise ValueError("delay must not be negative")
        self.callback = callback
        self.delay = delay
        self._timer: Optional[threading.Timer] = None
        self._lock = threading.Lock()

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = threading.Timer(self.delay, self._fire, args=args, kwargs=kwargs)
            self._timer.daemon = True
            self._timer.start()

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._timer is not None

    def cancel(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    def _fire(self, *args: Any, **kwargs: Any) -> None:
        with self._lock:
            if self._timer is not threading.current_thread():
                return
            self._timer = None
        self.callback(*args, **kwargs)
