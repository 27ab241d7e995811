[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "anttools"
version = "0.1.0"
description = "Thread-safe containers, a delay queue, text and data codecs, crypto helpers, translations, zip archives, SQL value types and a Redis wrapper"
requires-python = ">=3.11"
keywords = [
    "utilities",
    "containers",
    "codecs",
    "crypto",
    "i18n",
    "zip",
    "redis",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]
dependencies = [
    "cryptography",
    "pyyaml",
    "tomli-w",
    "redis",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["anttools"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"
