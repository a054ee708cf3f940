[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "matscript"
version = "0.1.0"
description = "A small interpreter for integer matrix scripts with addition, multiplication and transpose"
requires-python = ">=3.10"
dependencies = []
keywords = ["matrix", "linear algebra", "expression", "postfix", "interpreter", "script"]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
matscript = "matscript.script:main"

[tool.hatch.build.targets.wheel]
packages = ["matscript"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
