[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "searchsortdemo"
version = "0.1.0"
description = "Interactive console demos of classic searching and sorting algorithms"
requires-python = ">=3.10"
dependencies = []
keywords = ["searching", "sorting", "algorithms", "binary search", "education", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Indonesian",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
searchsortdemo-search = "searchsortdemo.searching:main"
searchsortdemo-sort = "searchsortdemo.sorting:main"

[tool.hatch.build.targets.wheel]
packages = ["searchsortdemo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
