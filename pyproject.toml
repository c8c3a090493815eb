[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "exgrade"
version = "0.1.0"
description = "Exercise grader that builds and tests programming exercises, plus reference solutions for a set of algorithm problems"
requires-python = ">=3.10"
dependencies = []
keywords = ["grading", "exercises", "algorithms", "education", "testing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
exgrade = "exgrade.grader:main"

[tool.hatch.build.targets.wheel]
packages = ["exgrade"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
