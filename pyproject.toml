[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "acmecontacts"
version = "0.1.0"
description = "A small interactive contact book kept in id order and saved to a local data file"
requires-python = ">=3.10"
dependencies = []
keywords = ["contacts", "address book", "terminal", "menu"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Groupware",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
acmecontacts = "acmecontacts.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["acmecontacts"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
