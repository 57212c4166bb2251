[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pacupdater"
version = "0.1.0"
description = "A terminal front end that lists pending pacman updates and installs them"
requires-python = ">=3.10"
dependencies = []
keywords = ["pacman", "updates", "arch", "checkupdates", "package-manager"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Software Distribution",
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pacupdater = "pacupdater.app:main"

[tool.hatch.build.targets.wheel]
packages = ["pacupdater"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
