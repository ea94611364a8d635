import io
import re
import socket
import threading
import time
from contextlib import contextmanager

import pytest

from sysdemos.events import main, serve_echo, serve_print

HOST = "127.0.0.1"


def _free_port():
    with socket.socket() as sock:
        sock.bind((HOST, 0))
        return sock.getsockname()[1]


def _connect(port, deadline=5.0):
    end = time.monotonic() + deadline
    while True:
        try:
            return socket.create_connection((HOST, port), timeout=2)
        except ConnectionRefusedError:
            if time.monotonic() > end:
                raise
            time.sleep(0.05)


@contextmanager
def _running(call, stop):
    thread = threading.Thread(target=call, daemon=True)
    thread.start()
    try:
        yield
    finally:
        stop.set()
        thread.join(5)


def _recv_n(sock, size):
    data = b""
    while len(data) < size:
        chunk = sock.recv(size - len(data))
        if not chunk:
            break
        data += chunk
    return data


def _wait_for(output, marker, timeout=5.0):
    end = time.monotonic() + timeout
    while marker not in output.getvalue() and time.monotonic() < end:
        time.sleep(0.02)
    return output.getvalue()


def test_echo_returns_message():
    port = _free_port()
    stop = threading.Event()
    with _running(lambda: serve_echo(HOST, port, stop), stop):
        with _connect(port) as client:
            client.sendall(b"hello")
            assert _recv_n(client, 5) == b"hello"


def test_echo_serves_several_clients_independently():
    port = _free_port()
    stop = threading.Event()
    with _running(lambda: serve_echo(HOST, port, stop), stop):
        with _connect(port) as first, _connect(port) as second:
            first.sendall(b"one")
            second.sendall(b"two")
            assert _recv_n(second, 3) == b"two"
            assert _recv_n(first, 3) == b"one"


def test_echo_keeps_running_after_client_leaves():
    port = _free_port()
    stop = threading.Event()
    with _running(lambda: serve_echo(HOST, port, stop), stop):
        with _connect(port) as client:
            client.sendall(b"x")
            assert _recv_n(client, 1) == b"x"
        with _connect(port) as client:
            client.sendall(b"again")
            assert _recv_n(client, 5) == b"again"


def test_print_writes_data_and_connection_reports():
    port = _free_port()
    output = io.BytesIO()
    stop = threading.Event()
    with _running(lambda: serve_print(HOST, port, output, stop), stop):
        with _connect(port) as client:
            client.sendall(b"ping\n")
        text = _wait_for(output, b"Closed connection")
    assert b"ping\n" in text
    assert b"Accepted connection on descriptor" in text
    assert f"(host={HOST}, port=".encode() in text


def test_print_reports_same_descriptor_on_close():
    port = _free_port()
    output = io.BytesIO()
    stop = threading.Event()
    with _running(lambda: serve_print(HOST, port, output, stop), stop):
        with _connect(port) as client:
            client.sendall(b"data")
        text = _wait_for(output, b"Closed connection").decode()
    opened = re.search(r"Accepted connection on descriptor (\d+)", text)
    closed = re.search(r"Closed connection on descriptor (\d+)", text)
    assert opened and closed
    assert opened.group(1) == closed.group(1)


def test_print_reads_large_message_completely():
    port = _free_port()
    output = io.BytesIO()
    payload = b"abc" * 1000
    stop = threading.Event()
    with _running(lambda: serve_print(HOST, port, output, stop), stop):
        with _connect(port) as client:
            client.sendall(payload)
        text = _wait_for(output, b"Closed connection")
    assert payload in text


def test_print_raises_when_port_taken():
    with socket.socket() as occupier:
        occupier.bind((HOST, 0))
        occupier.listen(1)
        port = occupier.getsockname()[1]
        with pytest.raises(OSError):
            serve_print(HOST, port, io.BytesIO(), threading.Event())


def test_main_requires_mode():
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2