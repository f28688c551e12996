[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tcphttp"
version = "0.1.0"
description = "An incremental HTTP/1.1 request parser with a small TCP listener and UDP line sender"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "parser", "tcp", "udp", "request", "headers"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tcplistener = "tcphttp.tcplistener:main"
udpsender = "tcphttp.udpsender:main"

[tool.hatch.build.targets.wheel]
packages = ["tcphttp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
