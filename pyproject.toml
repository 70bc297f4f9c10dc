[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qwak"
version = "0.1.0"
description = "Quick agentic aliases: store prompts under short names and run them through an AI agent command."
requires-python = ">=3.10"
dependencies = []
keywords = ["ai", "agents", "aliases", "cli", "prompts"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
qwk = "qwak.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["qwak"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
