[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "itop"
version = "0.1.0"
description = "A colourful terminal system monitor for CPU, memory, swap and Apple Silicon GPU usage"
requires-python = ">=3.10"
keywords = ["monitor", "top", "terminal", "cpu", "memory", "gpu", "tui"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]
dependencies = [
    "psutil",
    "rich",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
itop = "itop.main:main"

[tool.hatch.build.targets.wheel]
packages = ["itop"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
