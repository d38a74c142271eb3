[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minidrive"
version = "0.1.0"
description = "Client-side building blocks for a small remote file drive: command-line configuration, logging, resumable transfer state, remote path handling and prompt helpers."
requires-python = ">=3.10"
dependencies = []
keywords = ["file-sharing", "file-transfer", "sync", "upload", "download", "resume"]
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
    "Topic :: Communications :: File Sharing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["minidrive"]

[tool.hatch.build.targets.sdist]
include = ["minidrive", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
check_untyped_defs = true
