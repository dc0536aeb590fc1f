"""Cancellation tokens for in-flight requests and pagination."""

import threading
from typing import Callable, Optional

Callback = Callable[[], None]


class CancellationToken:
    """A one-shot cancellation signal.

    Callbacks registered with :meth:`add_callback` run exactly once, on the
    first call to :meth:`cancel`, and are dropped afterwards. ``cancel`` may be
    called from any thread.

    Examples:
        ```python
        token = CancellationToken()
        task = client.tickets.list_async(options=RequestOptions(cancel_token=token))
        ...
        token.cancel()
        ```
    """

    def __init__(self) -> None:
        self._cancelled = False
        self._callbacks: list[Callback] = []
        self._lock = threading.Lock()

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        with self._lock:
            if self._cancelled:
                return
            self._cancelled = True
            callbacks, self._callbacks = self._callbacks, []

        for callback in callbacks:
            callback()

    def add_callback(self, callback: Callback) -> Callback:
        """Register ``callback`` to run on cancellation.

        Runs it immediately if the token is already cancelled.

        Returns:
            A function that unregisters the callback. Calling it more than once
            is harmless.
        """
        with self._lock:
            if not self._cancelled:
                self._callbacks.append(callback)
                return lambda: self._remove_callback(callback)

        callback()
        return lambda: None

    def _remove_callback(self, callback: Callback) -> None:
        with self._lock:
            try:
                self._callbacks.remove(callback)
            except ValueError:
                pass

    @property
    def listener_count(self) -> int:
        return len(self._callbacks)

    @classmethod
    def any_of(cls, *tokens: Optional["CancellationToken"]) -> "LinkedCancellationToken":
        """Build a token that fires as soon as any of ``tokens`` fires.

        ``None`` entries are ignored, so an optional caller token can be passed
        straight through.
        """
        return LinkedCancellationToken([t for t in tokens if t is not None])


class LinkedCancellationToken(CancellationToken):
    """A token cancelled by whichever of its source tokens fires first.

    The links to the sources are removed on first trigger or on
    :meth:`close`, whichever comes first. Use it as a context manager so the
    sources never keep a reference to it past the operation it guards.
    """

    def __init__(self, sources: list[CancellationToken]) -> None:
        super().__init__()
        self._unlinks: list[Callback] = []
        self._closed = False
        for source in sources:
            self._unlinks.append(source.add_callback(self.cancel))
            if self._cancelled:
                break

    def cancel(self) -> None:
        super().cancel()
        self.close()

    def close(self) -> None:
        with self._lock:
            if self._closed:
                return
            self._closed = True
            unlinks, self._unlinks = self._unlinks, []

        for unlink in unlinks:
            unlink()

    def __enter__(self) -> "LinkedCancellationToken":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
