[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sysdemos"
version = "0.1.0"
description = "Small systems programs: merge sort, tokenizing, stream copying, socket servers and clients, a CGI-style server and a tiny shell"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "sockets",
    "tcp",
    "udp",
    "select",
    "echo-server",
    "cgi",
    "daytime",
    "ipv6",
    "shell",
    "merge-sort",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sysdemos-sort = "sysdemos.sorting:main"
sysdemos-strtok = "sysdemos.tokens:main"
sysdemos-cat = "sysdemos.streams:main"
sysdemos-upper = "sysdemos.uppercase:main"
sysdemos-udp-client = "sysdemos.udpclient:main"
sysdemos-daytime = "sysdemos.daytime:main"
sysdemos-events = "sysdemos.events:main"
sysdemos-cgi = "sysdemos.cgiserver:main"
sysdemos-shell = "sysdemos.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["sysdemos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
