[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minsh"
version = "0.1.0"
description = "A minimal interactive shell with command completion, highlighting and history"
requires-python = ">=3.11"
keywords = ["shell", "repl", "command-line", "completion", "terminal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]
dependencies = [
    "prompt-toolkit>=3.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
minsh = "minsh.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["minsh"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
