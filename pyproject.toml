[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quagga"
version = "0.1.0"
description = "Render source files through a tag-based prompt template and split the result into size-limited parts"
requires-python = ">=3.10"
dependencies = []
keywords = ["prompt", "template", "llm", "source-code", "split", "text-detection"]
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
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["quagga"]

[tool.pytest.ini_options]
addopts = "-ra"
