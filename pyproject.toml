[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "awsfuzzy"
version = "0.1.0"
description = "Helpers for AWS session names, EKS tokens, credential assumers, AWS Config resource types and transit gateway topology trees"
requires-python = ">=3.11"
dependencies = []
keywords = ["aws", "eks", "ksuid", "aws-config", "transit-gateway", "network-manager"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["awsfuzzy"]

[tool.hatch.build.targets.sdist]
include = ["awsfuzzy", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
