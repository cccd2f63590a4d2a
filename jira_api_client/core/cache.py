import threading
from typing import Any, Callable


class CachedValue:
    """A value computed on first use and kept for the lifetime of the owner.

    The loader runs under a lock, so concurrent first callers trigger a single
    load. A loader that raises leaves the cell empty and the next access
    tries again.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._loaded = False
        self._value = None

    @property
    def loaded(self) -> bool:
        return self._loaded

    def get(self, loader: Callable[[], Any]) -> Any:
        if self._loaded:
            return self._value
        with self._lock:
            if not self._loaded:
                self._value = loader()
                self._loaded = True
        return self._value
