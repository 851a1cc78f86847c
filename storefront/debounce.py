import threading
from typing import Any, Callable, Optional


class Debounced:
    """
    Trailing-edge debounce: fn runs once, ``wait`` seconds after the last
    call, with that call's arguments. Runs on a timer thread.
    """
    def __init__(self, fn: Callable[..., Any], wait: float):
        self.fn = fn
        self.wait = wait
        self._timer: Optional[threading.Timer] = None
        self._lock = threading.Lock()

    def __call__(self, *args, **kwargs) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = threading.Timer(self.wait, self.fn, args=args, kwargs=kwargs)
            self._timer.daemon = True
            self._timer.start()

    def cancel(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None


def debounce(fn: Callable[..., Any], wait: float = 0.3) -> Debounced:
    return Debounced(fn, wait)
