[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "workshophub"
version = "1.0.0"
description = "Interactive console for browsing workshops and managing participant registrations"
requires-python = ">=3.10"
dependencies = []
keywords = ["workshops", "registration", "enrollment", "console", "menu"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
workshophub = "workshophub.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["workshophub"]

[tool.pytest.ini_options]
addopts = "-ra"
