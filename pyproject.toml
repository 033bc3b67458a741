[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vslices"
version = "1.0.0"
description = "Products and orders HTTP routes organised as vertical slices over an in-memory store and an in-process event bus"
requires-python = ">=3.10"
keywords = ["vertical-slices", "cqrs", "event-bus", "rest", "api", "fastapi"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Framework :: FastAPI",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Typing :: Typed",
]
dependencies = [
    "fastapi",
    "pydantic>=2",
]

[project.optional-dependencies]
test = [
    "pytest",
    "httpx",
]

[tool.hatch.build.targets.wheel]
packages = ["vslices"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
