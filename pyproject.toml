[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ochamiclient"
version = "0.5.0"
description = "Async client library for the OpenCHAMI power control and hardware state manager services"
requires-python = ">=3.10"
dependencies = [
    "httpx",
]
keywords = ["ochami", "hpc", "power-control", "hsm", "xname", "cluster-management"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Framework :: AsyncIO",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
    "respx",
]

[tool.hatch.build.targets.wheel]
packages = ["ochamiclient"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
