[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gox"
version = "0.1.0"
description = "Small everyday helpers for bytes, lists, maps, JSON, HTML elements, time, files, zip archives, URLs and IP addresses."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "utilities",
    "helpers",
    "json",
    "iso-week",
    "spreadsheet",
    "zip",
    "ip-address",
    "url",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gox"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
