[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numdrills"
version = "0.1.0"
description = "Small number, digit, pattern and classification exercises as a plain Python library"
requires-python = ">=3.10"
dependencies = []
keywords = ["exercises", "number theory", "digits", "patterns", "primes", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
numdrills = "numdrills.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["numdrills"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
