[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tilegfx"
version = "0.1.0"
description = "Headless building blocks for tile games: a depth-ordered render queue, an input event hub, and character, string, memory and line-reading helpers."
requires-python = ">=3.10"
dependencies = []
keywords = ["tiles", "render-queue", "input-events", "string-utilities", "line-reader"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["tilegfx"]

[tool.hatch.build.targets.sdist]
include = ["tilegfx", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
