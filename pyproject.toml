[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "protoscheme"
version = "0.1.0"
description = "A small Scheme front end: AST dump reader, tree-walking interpreter, graph and IR building blocks"
requires-python = ">=3.10"
dependencies = []
keywords = ["scheme", "interpreter", "compiler", "ast", "intermediate-representation", "graph"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Compilers",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
protoscheme = "protoscheme.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["protoscheme"]

[tool.pytest.ini_options]
addopts = "-ra"
