[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ringarray"
version = "0.1.0"
description = "A fixed-capacity circular array (ring buffer) with deque-like operations"
requires-python = ">=3.10"
dependencies = []
keywords = ["ring buffer", "circular buffer", "deque", "container", "fixed capacity"]
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ringarray-demo = "ringarray.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["ringarray"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
