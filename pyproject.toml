[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "plainify"
version = "0.1.0"
description = "Detect and fix encoding issues, CRLF line endings, typographic characters, invisible characters and emoji in text files."
requires-python = ">=3.10"
dependencies = []
keywords = ["text", "lint", "ascii", "crlf", "bom", "unicode", "emoji", "trojan-source"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Quality Assurance",
    "Topic :: Text Processing :: Filters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
plainify = "plainify.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["plainify"]

[tool.pytest.ini_options]
addopts = "-ra"
