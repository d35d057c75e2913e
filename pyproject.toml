[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hapiq"
version = "0.1.0"
description = "Clean dataset identifiers cited in papers and turn PDF-extracted text into structured Markdown"
requires-python = ">=3.10"
dependencies = []
keywords = ["doi", "dataset", "identifier", "markdown", "pdf", "text", "segmentation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Filters",
    "Topic :: Text Processing :: Markup :: Markdown",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hapiq"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
