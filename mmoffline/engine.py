"""Engine that sends template-based queries to the order server."""

from __future__ import annotations

import logging
import urllib.error
import urllib.request
from collections.abc import Callable, Mapping
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Optional

from .awaiter import Reply, RequestAwaiter
from .query_templates import DEFAULT_TEMPLATES, QueryId, check_arg_quantity, fill_template

__all__ = ["HttpUpdateEngine", "Transport", "urllib_transport"]

_log = logging.getLogger(__name__)

Transport = Callable[[str, Mapping[str, str]], "Future[Reply]"]

_EXECUTOR = ThreadPoolExecutor(max_workers=4, thread_name_prefix="mmoffline-http")

_REQUEST_TIMEOUT = 60.0


def _fetch(url: str, headers: Mapping[str, str]) -> Reply:
    request = urllib.request.Request(url, headers=dict(headers))
    try:
        with urllib.request.urlopen(request, timeout=_REQUEST_TIMEOUT) as response:
            return Reply(data=response.read(), status=response.status, reason=response.reason)
    except urllib.error.HTTPError as exc:
        return Reply(data=exc.read() or b"", status=exc.code, reason=str(exc.reason), error=str(exc))
    except urllib.error.URLError as exc:
        return Reply(status=0, error=str(exc.reason))
    except OSError as exc:
        return Reply(status=0, error=str(exc))


def urllib_transport(url: str, headers: Mapping[str, str]) -> "Future[Reply]":
    """Send a GET request in the background and return a future of its reply."""
    return _EXECUTOR.submit(_fetch, url, dict(headers))


def _from_user_input(url: str) -> str:
    url = url.strip()
    if "://" not in url:
        url = "http://" + url
    return url


class HttpUpdateEngine:
    """Sends queries built from templates to a base url."""

    def __init__(
        self,
        url: str,
        templates: Optional[Mapping[QueryId, str]] = None,
        transport: Optional[Transport] = None,
    ) -> None:
        self._url = url
        self.templates: dict[QueryId, str] = dict(
            DEFAULT_TEMPLATES if templates is None else templates
        )
        self._transport: Transport = transport or urllib_transport
        self.next_query_id = 0
        self.session_id = ""
        self._user_id = ""

    @property
    def url(self) -> str:
        """Base url that queries are appended to."""
        return self._url

    @url.setter
    def url(self, value: str) -> None:
        self._url = value
        self.init_connection()

    @property
    def user_id(self) -> str:
        """Id of the logged-in user."""
        return self._user_id

    def session_ready(self) -> bool:
        """True once a session id is set."""
        return bool(self.session_id)

    def init_connection(self) -> None:
        """Ping the server."""
        self.send_query("ping", None)

    def send_query(
        self, urlpath: str, awaiter: Optional[RequestAwaiter] = None
    ) -> Optional["Future[Reply]"]:
        """Send a GET for ``urlpath`` and attach the reply to ``awaiter``.

        Nothing is sent, and None is returned, while the awaiter is busy.
        """
        if awaiter is not None and awaiter.is_awaiting:
            return None
        full_url = _from_user_input(self._url + urlpath)
        _log.debug("sendQuery url: %s", full_url)
        future = self._transport(full_url, {"Puller": "MMOffline"})
        if awaiter is not None:
            awaiter.await_reply(future)
        return future

    def _take_query_id(self) -> int:
        query_id = self.next_query_id
        self.next_query_id += 1
        return query_id

    def initiate_session(
        self, login: str, password: str, awaiter: Optional[RequestAwaiter] = None
    ) -> Optional["Future[Reply]"]:
        """Send the login query."""
        path = fill_template(
            self.templates[QueryId.LOGIN], self._take_query_id(), login, password
        )
        return self.send_query(path, awaiter)

    def exec_query(
        self,
        query_id: QueryId,
        *args: object,
        awaiter: Optional[RequestAwaiter] = None,
    ) -> Optional["Future[Reply]"]:
        """Send a query with the session and ``args`` filled in.

        Raises ValueError when the query takes a different number of
        arguments; sends nothing and returns None without a session.
        """
        if not check_arg_quantity(query_id, len(args)):
            raise ValueError(
                f"query {query_id!r} does not take {len(args)} argument(s)"
            )
        if not self.session_id:
            return None
        path = fill_template(
            self.templates[QueryId(query_id)],
            self._take_query_id(),
            self.session_id,
            *args,
        )
        return self.send_query(path, awaiter)

    def exec_autofill_query(
        self, query_id: QueryId, awaiter: Optional[RequestAwaiter] = None
    ) -> Optional["Future[Reply]"]:
        """Send a query whose only extra argument is its own id."""
        path = fill_template(
            self.templates[QueryId(query_id)],
            self._take_query_id(),
            self.session_id,
            int(query_id),
        )
        return self.send_query(path, awaiter)

    def set_session(self, session: str, uid: str) -> None:
        """Store the session id and user id."""
        self.session_id = session
        self._user_id = uid