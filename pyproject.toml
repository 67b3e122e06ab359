[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "envbind"
version = "0.1.0"
description = "Bind environment variables and .env files to typed dataclass fields, with scoped overrides."
requires-python = ">=3.10"
keywords = ["dotenv", "environment", "configuration", "dataclass", "settings"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "python-dotenv",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["envbind"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
