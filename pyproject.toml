[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ripkit"
version = "2.0.0"
description = "Release tooling for Go modules plus the building blocks of a markdown code-block web app."
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["release", "git", "docker", "go", "markdown", "code blocks", "tooling"]
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
    "Topic :: Software Development :: Build Tools",
    "Topic :: Software Development :: Version Control :: Git",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ripkit-release = "ripkit.release:main"

[tool.hatch.build.targets.wheel]
packages = ["ripkit"]

[tool.hatch.build.targets.sdist]
include = ["ripkit", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
