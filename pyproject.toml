[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clobook"
version = "0.2.0"
description = "A central limit order book with price-time priority matching."
requires-python = ">=3.10"
dependencies = []
keywords = ["order book", "limit order", "matching engine", "exchange", "trading"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
clobook = "clobook.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["clobook"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
