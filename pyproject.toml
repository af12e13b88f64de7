[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "calcc"
version = "0.1.0"
description = "A compiler for a tiny arithmetic expression language that emits LLVM IR"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "llvm", "expression", "calculator", "parser"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
calcc = "calcc.cli:main"

[tool.setuptools.packages.find]
include = ["calcc*"]

[tool.pytest.ini_options]
addopts = "-ra"
