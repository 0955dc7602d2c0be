[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "engineerops"
version = "0.1.0"
description = "In-memory GitHub, Jira and Slack stand-ins, a markdown chunker, an embedding client and configuration loading"
requires-python = ">=3.10"
dependencies = []
keywords = ["jira", "slack", "github", "embedding", "configuration", "mock"]
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
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["engineerops"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
