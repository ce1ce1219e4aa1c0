[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algodrills"
version = "0.1.0"
description = "Small, readable implementations of classic beginner algorithm drills: patterns, number tricks, recursion, hashing and sorting."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "education",
    "recursion",
    "sorting",
    "patterns",
    "exercises",
]
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
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
algodrills-patterns = "algodrills.patterns:main"
algodrills-numbers = "algodrills.numbers:main"
algodrills-recursion = "algodrills.recursion:main"
algodrills-sort = "algodrills.sorting:main"
algodrills-reverse = "algodrills.reversal:main"
algodrills-hashing = "algodrills.hashing:main"

[tool.hatch.build.targets.wheel]
packages = ["algodrills"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
files = ["algodrills"]
