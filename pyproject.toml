[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rldpnet"
version = "0.1.0"
description = "Building blocks of a reliable large datagram protocol: transfer state, packet history, compression and query dispatch"
requires-python = ">=3.10"
dependencies = [
    "zstandard",
]
keywords = ["rldp", "adnl", "networking", "datagram", "protocol", "zstd"]
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
    "Framework :: AsyncIO",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["rldpnet"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
