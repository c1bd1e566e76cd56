[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aicoder"
version = "0.1.0"
description = "Command-line tool that generates or refactors code from a prompt using a chat-completion API"
requires-python = ">=3.10"
keywords = ["ai", "code generation", "refactoring", "openai", "azure", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Code Generators",
]
dependencies = [
    "click>=8.0",
    "requests>=2.28",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
    "responses>=0.23",
]

[project.scripts]
aicoder = "aicoder.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["aicoder"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
