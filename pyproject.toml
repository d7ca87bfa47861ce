[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lazytask"
version = "0.1.0"
description = "Task models, filtering and command-line integration for Taskwarrior"
requires-python = ">=3.11"
keywords = ["taskwarrior", "tasks", "todo", "productivity", "terminal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
    "Typing :: Typed",
]
dependencies = [
    "tomli-w>=1.0",
    "platformdirs>=3.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
lazytask-demo = "lazytask.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["lazytask"]

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
warn_redundant_casts = true
