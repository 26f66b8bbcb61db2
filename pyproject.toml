[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minilibc"
version = "0.1.0"
description = "C-runtime style helpers: NUL-terminated strings, ASCII ctype, series-based math, numeric parsing, an LCG, a bump allocator and console I/O"
requires-python = ">=3.10"
dependencies = []
keywords = ["libc", "ctype", "strings", "math", "scanf", "printf", "rand", "allocator"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["minilibc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
