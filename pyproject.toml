[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "profanutils"
version = "0.1.0"
description = "Small C-style runtime helpers, an in-memory file system with file commands, and a handful of demo programs"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "libc",
    "string",
    "stdlib",
    "virtual-filesystem",
    "interpreter",
    "game-of-life",
    "raycasting",
    "mandelbrot",
]
classifiers = [
    "Development Status :: 3 - Alpha",
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
profan-livra = "profanutils.livra:main"
profan-hanoi = "profanutils.hanoi:main"
profan-perf = "profanutils.primes:main"

[tool.hatch.build.targets.wheel]
packages = ["profanutils"]

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
