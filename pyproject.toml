[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linspect"
version = "0.1.0"
description = "Parse Linux df and mount-table output, render disk, network, process and socket statistics as tables, and keep statistics records as CSV time series."
requires-python = ">=3.10"
dependencies = []
keywords = ["linux", "df", "mtab", "diskstats", "monitoring", "csv", "time-series", "interpolation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["linspect"]

[tool.pytest.ini_options]
addopts = "-ra"
