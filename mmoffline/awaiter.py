"""Waiting for a single network reply with a timeout."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from concurrent.futures import Future
from dataclasses import dataclass
from typing import Optional

__all__ = ["Reply", "RequestAwaiter", "strip_rse", "RECEIVER_SLOT_NAME"]

RECEIVER_SLOT_NAME = "requestIncoming"

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Reply:
    """A finished network reply.

    ``error`` is empty when the transfer itself succeeded; the HTTP status
    and reason are then checked separately.
    """

    data: bytes = b""
    status: int = 200
    reason: str = ""
    error: str = ""


def strip_rse(text: str) -> str:
    """Unwrap a response of the form ``r...({...});``.

    Text starting with ``r`` loses everything before its first ``{`` and its
    last two characters; other text is returned unchanged.
    """
    if not text.startswith("r"):
        return text
    start = text.find("{")
    if start == -1:
        return ""
    return text[start:][:-2]


class RequestAwaiter:
    """Waits until a reply arrives or the interval (in milliseconds) runs out.

    Handlers are called with ``(restext, errtext)`` on success, with no
    arguments when any reply was received, and with no arguments on timeout.
    """

    def __init__(self, interval: int = 1000) -> None:
        self._interval = interval
        self._lock = threading.RLock()
        self._timer: Optional[threading.Timer] = None
        self._future: Optional[Future] = None
        self._awaiting = False
        self._was_timeout = False
        self._done = threading.Event()
        self.restext = ""
        self.errtext = ""
        self.success_handlers: list[Callable[[str, str], None]] = []
        self.received_handlers: list[Callable[[], None]] = []
        self.timeout_handlers: list[Callable[[], None]] = []

    @property
    def interval(self) -> int:
        """Timeout interval in milliseconds."""
        return self._interval

    @property
    def is_awaiting(self) -> bool:
        """True while neither a reply nor a timeout has come."""
        return self._awaiting

    @property
    def was_timeout(self) -> bool:
        """True when the last wait ended with a timeout."""
        return self._was_timeout

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def run(self) -> None:
        """Start the countdown, raise the awaiting flag and clear the results."""
        with self._lock:
            self._cancel_timer()
            self._awaiting = True
            self._was_timeout = False
            self.restext = ""
            self.errtext = ""
            self._done.clear()
            timer = threading.Timer(self._interval / 1000.0, self._timer_fired)
            timer.daemon = True
            self._timer = timer
            timer.args = (timer,)
            timer.start()

    def _timer_fired(self, timer: threading.Timer) -> None:
        with self._lock:
            if timer is not self._timer or not self._awaiting:
                return
        self.on_timeout()

    def stop_awaiting(self) -> None:
        """Stop the countdown without recording a timeout."""
        with self._lock:
            self._awaiting = False
            self._was_timeout = False
            self._cancel_timer()
            self._done.set()

    def await_reply(self, future: Future) -> bool:
        """Attach a pending reply and start waiting for it.

        Returns False, doing nothing, when a reply is already attached.
        """
        with self._lock:
            if self._future is not None:
                return False
            self._future = future
            self.run()
        future.add_done_callback(self._future_done)
        return True

    def _future_done(self, future: Future) -> None:
        with self._lock:
            if future is not self._future or future.cancelled():
                return
        exc = future.exception()
        reply = Reply(status=0, error=str(exc) or type(exc).__name__) if exc else future.result()
        self.on_reply(reply)

    def on_timeout(self) -> None:
        """Record a timeout, drop the attached reply and notify handlers."""
        with self._lock:
            self._timer = None
            self._awaiting = False
            self._was_timeout = True
            future, self._future = self._future, None
            self._done.set()
        if future is not None:
            future.cancel()
        for handler in list(self.timeout_handlers):
            handler()

    def on_reply(self, reply: Reply) -> None:
        """Store the text and error of a reply and notify handlers."""
        if not reply.error:
            self.restext = reply.data.decode("cp1251", errors="replace")
            errtext = "" if reply.status == 200 else f"{reply.status} {reply.reason}"
        else:
            errtext = reply.error
        with self._lock:
            self.errtext = errtext
            self._awaiting = False
            self._cancel_timer()
            self._was_timeout = False
            self._future = None
            self.restext = strip_rse(self.restext)
            restext = self.restext
            self._done.set()
        _log.debug("response received: %r, error: %r", restext, errtext)
        for handler in list(self.success_handlers):
            handler(restext, errtext)
        for handler in list(self.received_handlers):
            handler()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until waiting ends; True when a reply arrived in time."""
        with self._lock:
            if not self._awaiting:
                return not self._was_timeout
        self._done.wait(timeout)
        with self._lock:
            return not self._awaiting and not self._was_timeout