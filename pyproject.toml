[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gherkin-kit"
version = "0.1.0"
description = "Building blocks for reading Gherkin feature files: lines, tokens, AST nodes and file scanning."
requires-python = ">=3.10"
dependencies = []
keywords = ["gherkin", "bdd", "cucumber", "feature", "tokenizer", "ast"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Testing :: BDD",
    "Topic :: Text Processing",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gherkin_kit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
