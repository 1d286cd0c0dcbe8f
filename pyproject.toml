[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zhconvert"
version = "1.1.9"
description = "Dictionary-driven conversion between Chinese character variants, with trie dictionaries and phrase extraction"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "chinese",
    "traditional",
    "simplified",
    "conversion",
    "dictionary",
    "segmentation",
    "trie",
    "phrase-extraction",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Natural Language :: Chinese (Simplified)",
    "Natural Language :: Chinese (Traditional)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["zhconvert"]

[tool.hatch.build.targets.sdist]
include = ["zhconvert", "tests", "README.md"]

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
warn_unused_ignores = true
warn_redundant_casts = true
