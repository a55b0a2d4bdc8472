import pytest

from sc2bot.api import API


class FakeConnection:
    def __init__(self, replies=()):
        self.sent = []
        self.replies = list(replies)
        self.closed = False

    def send_binary(self, data):
        self.sent.append(data)

    def recv(self):
        if not self.replies:
            raise ConnectionError("no reply")
        return self.replies.pop(0)

    def close(self):
        self.closed = True


class Serializable:
    def SerializeToString(self):
        return b"serialized"


def test_send_returns_response():
    conn = FakeConnection([b"reply"])
    api = API(conn)
    assert api.send(b"req") == b"reply"
    assert conn.sent == [b"req"]


def test_send_uses_factory():
    conn = FakeConnection([b"abc"])
    api = API(conn, lambda data: data.upper())
    assert api.send(b"x") == b"ABC"


def test_send_text_reply_encoded():
    conn = FakeConnection(["text"])
    assert API(conn).send(b"x") == b"text"


def test_send_request_consumes_reply():
    conn = FakeConnection([b"one", b"two"])
    api = API(conn)
    assert api.send_request(b"a") is None
    assert conn.replies == [b"two"]


def test_send_only_then_wait_response():
    conn = FakeConnection([b"later"])
    api = API(conn)
    api.send_only(b"a")
    assert conn.replies == [b"later"]
    assert api.wait_response() == b"later"
    assert conn.sent == [b"a"]


def test_serializable_request():
    conn = FakeConnection([b"ok"])
    API(conn).send(Serializable())
    assert conn.sent == [b"serialized"]


def test_bad_request_type():
    conn = FakeConnection([b"ok"])
    with pytest.raises(TypeError):
        API(conn).send(123)
    assert conn.sent == []


def test_connection_error_propagates():
    with pytest.raises(ConnectionError):
        API(FakeConnection()).send(b"x")


def test_context_manager_closes():
    conn = FakeConnection()
    with API(conn) as api:
        api.send_only(b"x")
    assert conn.closed is True