[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "inventario"
version = "0.1.0"
description = "Small desktop inventory of electronic, mechanical, tool and consumable components backed by SQLite, with CSV and PDF reports"
requires-python = ">=3.10"
dependencies = []
keywords = ["inventory", "stock", "components", "sqlite", "csv", "pdf", "tkinter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Environment :: Win32 (MS Windows)",
    "Environment :: MacOS X",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
inventario = "inventario.app:main"

[tool.hatch.build.targets.wheel]
packages = ["inventario"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
