[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "uppkit"
version = "0.1.0"
description = "Small utilities: string helpers, callable wrappers, guarded values, enum maps and bitmasks, ring buffers, route matching and a cooperative task scheduler"
requires-python = ">=3.10"
dependencies = []
keywords = ["utilities", "ring buffer", "bitmask", "enum map", "routing", "scheduler", "coroutines"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["uppkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
