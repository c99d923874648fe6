[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hyfetcher"
version = "0.1.0"
description = "Offline website and article downloader that saves pages with their images and videos and builds a browsable index."
requires-python = ">=3.10"
keywords = ["offline", "downloader", "archiver", "html", "index", "scraper"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Framework :: AsyncIO",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: System :: Archiving :: Mirroring",
]
dependencies = [
    "httpx",
    "beautifulsoup4",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
    "respx",
]

[project.scripts]
hyfetcher = "hyfetcher.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hyfetcher"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
