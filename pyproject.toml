[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oslabkit"
version = "0.1.0"
description = "Operating-systems lab exercises: Banker's algorithm, disk scheduling, file allocation and parallel reductions"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "operating systems",
    "bankers algorithm",
    "deadlock avoidance",
    "disk scheduling",
    "file allocation",
    "parallel reduction",
    "education",
]
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
oslabkit-banker = "oslabkit.banker:main"
oslabkit-disk = "oslabkit.disk:main"
oslabkit-filealloc = "oslabkit.filealloc:main"
oslabkit-reduce = "oslabkit.reduce:main"

[tool.hatch.build.targets.wheel]
packages = ["oslabkit"]

[tool.pytest.ini_options]
addopts = "-ra"
