[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cloudisk"
version = "0.1.0"
description = "A TCP file-sharing client with a framed command protocol, a thread-pooled task queue and supporting data structures"
requires-python = ">=3.10"
dependencies = []
keywords = ["file-sharing", "tcp", "threadpool", "client", "protocol"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: File Sharing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cloudisk-client = "cloudisk.client:main"

[tool.hatch.build.targets.wheel]
packages = ["cloudisk"]

[tool.pytest.ini_options]
addopts = "-ra"
