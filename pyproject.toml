[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cppgen"
version = "0.1.0"
description = "A builder API for generating C source code: expressions, statements, functions, struct fields and enums"
requires-python = ">=3.10"
dependencies = []
keywords = ["code generation", "c", "codegen", "builder", "source code"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Programming Language :: C",
    "Programming Language :: C++",
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cppgen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
