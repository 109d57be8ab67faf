[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scutil"
version = "2.0.0"
description = "Small systems utilities: an open-addressing hash map, a rotating logger, a mutex, memory-mapped files and option parsing"
requires-python = ">=3.10"
dependencies = []
keywords = ["hashmap", "murmurhash", "logger", "mmap", "mutex", "options"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["scutil"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
