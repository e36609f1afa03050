[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gitcode"
version = "0.1.0"
description = "A small git-like tool that initialises a repository, hashes blobs and inspects loose objects"
requires-python = ">=3.10"
dependencies = []
keywords = ["git", "version-control", "objects", "zlib", "sha1"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Version Control :: Git",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gitcode = "gitcode.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gitcode"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
