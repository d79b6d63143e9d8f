[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "docxsite"
version = "0.1.0"
description = "A small HTTP server that renders a documentation-style page from components with scoped CSS classes."
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "server", "html", "css", "components"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
docxsite = "docxsite.server:main"

[tool.hatch.build.targets.wheel]
packages = ["docxsite"]

[tool.pytest.ini_options]
addopts = "-ra"
