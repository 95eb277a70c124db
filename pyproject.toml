[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oaspec"
version = "0.1.0"
description = "Helpers for walking YAML documents, resolving references and building OpenAPI descriptions"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["openapi", "swagger", "yaml", "schema", "api", "code-generation"]
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
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
oaspec-petstore = "oaspec.petstore_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["oaspec"]

[tool.hatch.build.targets.sdist]
include = ["oaspec", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
