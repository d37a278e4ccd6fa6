[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ftls"
version = "0.1.0"
description = "A small ls-style directory lister with a self-contained printf-style formatter"
requires-python = ">=3.10"
dependencies = []
keywords = ["ls", "directory", "listing", "filesystem", "printf", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ftls = "ftls.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ftls"]

[tool.pytest.ini_options]
addopts = "-ra"
