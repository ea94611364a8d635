import io
import socket
import sys
import threading

from sysdemos.udpclient import MAXLINE, main, send_lines

HOST = "127.0.0.1"


def _echo_server(count):
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind((HOST, 0))
    sock.settimeout(5)
    sizes = []

    def run():
        with sock:
            for _ in range(count):
                data, address = sock.recvfrom(1024)
                sizes.append(len(data))
                sock.sendto(data.upper(), address)

    thread = threading.Thread(target=run, daemon=True)
    thread.start()
    return sock.getsockname()[1], thread, sizes


def test_send_lines_writes_replies_in_order():
    port, thread, _ = _echo_server(2)
    out = io.BytesIO()
    count = send_lines([b"hello\n", "world\n"], HOST, port, out)
    thread.join(5)
    assert count == 2
    assert out.getvalue() == b"HELLO\nWORLD\n"


def test_long_line_is_split_into_chunks():
    line = b"a" * 100 + b"\n"
    port, thread, sizes = _echo_server(2)
    out = io.BytesIO()
    count = send_lines([line], HOST, port, out)
    thread.join(5)
    assert count == 2
    assert all(size <= MAXLINE - 1 for size in sizes)
    assert sum(sizes) == len(line)
    assert out.getvalue() == line.upper()


def test_no_lines_sends_nothing():
    out = io.BytesIO()
    assert send_lines([], HOST, 9, out) == 0
    assert out.getvalue() == b""


def test_main_reads_stdin(monkeypatch, capsysbinary):
    port, thread, _ = _echo_server(1)
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"abc\n")))
    assert main(["--host", HOST, "--port", str(port)]) == 0
    thread.join(5)
    assert capsysbinary.readouterr().out == b"ABC\n"