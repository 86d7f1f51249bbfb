[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "edgekit"
version = "0.1.0"
description = "Helpers for screen-edge widgets: colour parsing, path and pixel-buffer drawing, text rendering, text templates and a command line that builds daemon requests"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["widgets", "desktop", "color", "template", "edges", "argb"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
edgekit = "edgekit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["edgekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
