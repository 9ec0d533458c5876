[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "whps"
version = "0.1.0"
description = "Building blocks for a small multi-threaded HTTP server: URL codec, string helpers, thread-safe containers, task queues, thread pools, polling and sockets."
requires-python = ">=3.10"
keywords = ["http", "server", "thread-pool", "polling", "url-encoding", "containers"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["whps"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
