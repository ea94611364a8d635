# sysdemos

Small systems programs, each usable from Python and as a console command:
a bottom-up merge sort, delimiter-based tokenizing, stream copying,
upper-casing servers over TCP, UDP and readiness polling, a UDP line client,
an IPv6 daytime client, event-driven echo and print servers, a CGI-style
HTTP server and a tiny command shell.

Only the Python standard library is needed; Python 3.10 or later.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

| Command               | What it does |
|-----------------------|--------------|
| `sysdemos-sort`       | Merge-sorts the integers given as arguments (or a fixed sample) and prints them tab-separated |
| `sysdemos-strtok`     | `sysdemos-strtok [TEXT [DELIMITERS]]` prints each token on its own line (default `a:;22:;33` split on `:;`) |
| `sysdemos-cat`        | Copies standard input to standard output; `-c/--chunk-size` sets the bytes per read |
| `sysdemos-upper`      | `sysdemos-upper [tcp\|udp\|select] [--host H] [--port P]` runs a server that answers each message in upper case (port 8000 by default) |
| `sysdemos-udp-client` | Sends standard input line by line to a UDP server and writes the replies (`--host`, `--port`, default 127.0.0.1:8000) |
| `sysdemos-daytime`    | `sysdemos-daytime ADDRESS [--port P]` connects to a daytime server at an IPv6 address and prints what it sends |
| `sysdemos-events`     | `sysdemos-events echo [--host H] [--port P]` echoes messages back (port 1500 by default); `sysdemos-events print PORT [--host H]` prints what clients send |
| `sysdemos-cgi`        | Runs an HTTP server (port 9003 by default) that answers each request with its query string, as echoed by a shell |
| `sysdemos-shell`      | Reads program names from standard input, runs each one and prints `% ` after it |

Each command accepts `--help`, except `sysdemos-sort` and `sysdemos-strtok`,
which take plain positional arguments, and `sysdemos-shell`, which takes none.

## Library use

```python
from sysdemos.sorting import merge_sort
from sysdemos.tokens import tokenize
from sysdemos.box import Box, cube
from sysdemos.streams import copy_stream
from sysdemos.uppercase import uppercase
from sysdemos.cgiserver import parse_request_line, html_response

merge_sort([2, 1, 5, 6, 3, 7, 4, 9, 8, 0])   # [0, 1, 2, ..., 9]
tokenize("a:;22:;33", ":;")                  # ["a", "22", "33"]
cube(5).volume()                              # 125
Box(5, 8, 12).volume()                        # 480
uppercase(b"hello")                           # b"HELLO"

request = parse_request_line("GET /c-shell?id=1 HTTP/1.1")
# RequestLine(method="GET", path="/c-shell", query="id=1")
response = html_response("id=1")              # b"HTTP/1.1 200 OK\r\n..."
```

Other pieces:

- `sysdemos.sockutil`: `recv_exactly`, `send_all` and `accept`, which finish
  partial reads and writes and retry interrupted or aborted accepts.
- `sysdemos.udpclient.send_lines(lines, host, port, output)` sends lines as
  datagrams of at most 79 bytes and writes every reply to `output`.
- `sysdemos.daytime.fetch_daytime(address, port)` returns the bytes a
  daytime server sends; a non-IPv6 address raises `ValueError`.
- `sysdemos.cgiserver.run_query(query)` runs a shell with `QUERY` set and
  returns up to 1024 bytes of its output.
- `sysdemos.shell.run_command(command)` and `run_shell(source, output)` run
  programs and return their exit statuses; a program that cannot be started
  gives 127.

The servers `serve_tcp`, `serve_udp`, `serve_select` (in
`sysdemos.uppercase`), `serve_echo`, `serve_print` (in `sysdemos.events`) and
`serve` (in `sysdemos.cgiserver`) take a host, a port and an optional
`threading.Event` named `stop`; they check it about every 0.2 seconds, so they
can run in a background thread and be shut down cleanly.

## Limits

- The CGI-style server does not run scripts named by the request path; every
  request other than `/favicon.ico` is answered with its query string.
- The shell runs each line as a single program name, with no arguments,
  pipes or redirection.
- The daytime client accepts IPv6 addresses only.