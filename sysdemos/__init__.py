"""Small systems programs: sorting, tokenizing, streams, socket servers and clients, a CGI-style server and a shell."""

__version__ = "0.1.0"

__all__ = [
    "box",
    "cgiserver",
    "daytime",
    "events",
    "shell",
    "sockutil",
    "sorting",
    "streams",
    "tokens",
    "udpclient",
    "uppercase",
]