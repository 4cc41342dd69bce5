[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "toollinux"
version = "0.1.0"
description = "Small Linux system toolkit: config files, logging, system and disk information"
requires-python = ">=3.10"
dependencies = []
keywords = ["linux", "system", "config", "logging", "disk", "sysadmin"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
toollinux = "toollinux.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["toollinux"]

[tool.pytest.ini_options]
addopts = "-ra"
