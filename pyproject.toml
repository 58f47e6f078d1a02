[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bytering"
version = "0.1.0"
description = "A lightweight fixed-size byte ring buffer with a producer/consumer demo"
requires-python = ">=3.10"
dependencies = []
keywords = ["ring buffer", "circular buffer", "fifo", "bytes", "queue"]
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

[project.scripts]
bytering = "bytering.app:main"

[tool.hatch.build.targets.wheel]
packages = ["bytering"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
