[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsdrills"
version = "0.1.0"
description = "Classic data-structure drills: a priority queue, big integers, an open-addressing string map, a token scanner and simple graph traversal"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "priority queue",
    "big integer",
    "hash map",
    "tokenizer",
    "graph traversal",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsdrills-linked-pq = "dsdrills.linked_pq:main"
dsdrills-traverse = "dsdrills.traverse:main"
dsdrills-bigint = "dsdrills.bigint:main"
dsdrills-stringmap = "dsdrills.stringmap:main"

[tool.hatch.build.targets.wheel]
packages = ["dsdrills"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
