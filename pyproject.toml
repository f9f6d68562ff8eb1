[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "phonebook"
version = "1.0.0"
description = "A small interactive phone book with an eight-entry memory, plus a megaphone that shouts its arguments."
requires-python = ">=3.10"
dependencies = []
keywords = ["phonebook", "contacts", "address book", "cli", "megaphone"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
phonebook = "phonebook.cli:main"
megaphone = "phonebook.megaphone:main"

[tool.hatch.build.targets.wheel]
packages = ["phonebook"]

[tool.pytest.ini_options]
addopts = "-ra"
