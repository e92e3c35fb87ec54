[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mmoffline"
version = "0.1.0"
description = "Offline order-taking core: query templates, response parsing, request awaiting and screen-flow logic"
requires-python = ">=3.10"
dependencies = []
keywords = ["orders", "offline", "sales", "json", "http", "templates"]
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
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mmoffline"]

[tool.pytest.ini_options]
addopts = "-ra"
