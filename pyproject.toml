[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zenkit"
version = "0.1.0"
description = "Small utility toolkit: vectors, Bézier curves, fractions, random generators, MD5, Base64, URL coding, UTF-8, CSV and localization tables."
requires-python = ">=3.10"
dependencies = []
keywords = ["math", "vector", "bezier", "fraction", "random", "md5", "base64", "csv", "localization", "utf8"]
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
    "Topic :: Software Development :: Libraries",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["zenkit"]

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
