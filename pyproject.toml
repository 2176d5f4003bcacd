[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fincalc"
version = "1.0.0"
description = "Interactive financial calculator: simple and compound interest, Price amortization, present and future value"
requires-python = ">=3.10"
dependencies = []
keywords = ["finance", "interest", "amortization", "present value", "future value", "calculator"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
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
    "Topic :: Office/Business :: Financial",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fincalc = "fincalc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fincalc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
