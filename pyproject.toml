[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nightcrawler"
version = "0.1.0"
description = "A small concurrent web crawler that counts internal links on a site"
requires-python = ">=3.10"
dependencies = []
keywords = ["crawler", "spider", "links", "web", "seo"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Indexing/Search",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
nightcrawler = "nightcrawler.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["nightcrawler"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
target-version = "py310"
line-length = 100
