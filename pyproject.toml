[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "florence-server"
version = "0.1.0"
description = "Building blocks for a server that queues praise events for concurrent worker cores: records, stacks, launch and write-turn control"
requires-python = ">=3.10"
dependencies = []
keywords = ["framework", "server", "concurrency", "scheduling", "threads"]
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
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["florence_server"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
