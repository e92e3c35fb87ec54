import time
from concurrent.futures import Future

import pytest

from mmoffline.awaiter import Reply, RequestAwaiter, strip_rse


@pytest.mark.parametrize(
    "text, expected",
    [
        ('r({"a":"b"});', '{"a":"b"}'),
        ('{"a":"b"}', '{"a":"b"}'),
        ("plain text", "plain text"),
        ("rnobrace", ""),
        ("", ""),
    ],
)
def test_strip_rse(text, expected):
    assert strip_rse(text) == expected


def test_on_reply_decodes_cp1251_and_strips():
    awaiter = RequestAwaiter(1000)
    payload = 'r({"name":"Привет"});'.encode("cp1251")
    received = []
    awaiter.success_handlers.append(lambda res, err: received.append((res, err)))
    awaiter.on_reply(Reply(data=payload))
    assert awaiter.restext == '{"name":"Привет"}'
    assert awaiter.errtext == ""
    assert received == [('{"name":"Привет"}', "")]


def test_on_reply_http_status_error():
    awaiter = RequestAwaiter(1000)
    awaiter.on_reply(Reply(data=b"body", status=404, reason="Not Found"))
    assert awaiter.errtext == "404 Not Found"
    assert awaiter.restext == "body"


def test_on_reply_transport_error_keeps_text_empty():
    awaiter = RequestAwaiter(1000)
    awaiter.run()
    awaiter.on_reply(Reply(data=b"ignored", status=0, error="Connection refused"))
    assert awaiter.errtext == "Connection refused"
    assert awaiter.restext == ""
    assert awaiter.is_awaiting is False


def test_received_handler_called():
    awaiter = RequestAwaiter(1000)
    calls = []
    awaiter.received_handlers.append(lambda: calls.append(True))
    awaiter.on_reply(Reply(data=b"x"))
    assert calls == [True]


def test_timeout():
    awaiter = RequestAwaiter(20)
    fired = []
    awaiter.timeout_handlers.append(lambda: fired.append(True))
    awaiter.run()
    assert awaiter.is_awaiting is True
    assert awaiter.wait(2.0) is False
    assert awaiter.was_timeout is True
    assert awaiter.is_awaiting is False
    assert fired == [True]


def test_await_reply_with_future():
    awaiter = RequestAwaiter(2000)
    future = Future()
    assert awaiter.await_reply(future) is True
    assert awaiter.is_awaiting is True
    future.set_result(Reply(data=b"r({});"))
    assert awaiter.wait(2.0) is True
    assert awaiter.restext == "{}"
    assert awaiter.was_timeout is False


def test_await_reply_rejects_second_future():
    awaiter = RequestAwaiter(2000)
    first = Future()
    assert awaiter.await_reply(first) is True
    assert awaiter.await_reply(Future()) is False
    awaiter.stop_awaiting()


def test_future_exception_becomes_error():
    awaiter = RequestAwaiter(2000)
    future = Future()
    awaiter.await_reply(future)
    future.set_exception(OSError("network down"))
    assert awaiter.wait(2.0) is True
    assert awaiter.errtext == "network down"


def test_timeout_cancels_future():
    awaiter = RequestAwaiter(20)
    future = Future()
    awaiter.await_reply(future)
    assert awaiter.wait(2.0) is False
    assert future.cancelled() is True


def test_stop_awaiting_prevents_timeout():
    awaiter = RequestAwaiter(30)
    fired = []
    awaiter.timeout_handlers.append(lambda: fired.append(True))
    awaiter.run()
    awaiter.stop_awaiting()
    time.sleep(0.1)
    assert fired == []
    assert awaiter.was_timeout is False
    assert awaiter.is_awaiting is False


def test_run_clears_previous_results():
    awaiter = RequestAwaiter(1000)
    awaiter.on_reply(Reply(data=b"old", status=500, reason="Err"))
    awaiter.run()
    assert (awaiter.restext, awaiter.errtext) == ("", "")
    awaiter.stop_awaiting()


def test_interval_property():
    assert RequestAwaiter(1234).interval == 1234