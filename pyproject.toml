[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sortsteps"
version = "0.1.0"
description = "Classic sorting algorithms that print every intermediate step"
requires-python = ">=3.10"
dependencies = []
keywords = ["sorting", "algorithms", "bubble sort", "quick sort", "linked list", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sortsteps"]

[tool.pytest.ini_options]
addopts = "-ra"
