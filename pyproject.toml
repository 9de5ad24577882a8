[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wwedit"
version = "1.0.0"
description = "Editing model, key dispatch and ANSI rendering for a small terminal text editor with Emacs-style key bindings"
requires-python = ">=3.10"
dependencies = []
keywords = ["editor", "text-editor", "terminal", "emacs", "keybindings", "fuzzy"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wwedit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
