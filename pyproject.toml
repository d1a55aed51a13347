[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ostepdemos"
version = "0.1.0"
description = "Small runnable demonstrations of operating-system concepts: processes, lottery scheduling, threads and their bugs, compare-and-swap, a persistent memory-mapped stack, micro-benchmarks and a UDP client and server."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "operating systems",
    "education",
    "threads",
    "concurrency",
    "scheduling",
    "fork",
    "mmap",
    "udp",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: System :: Operating System",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ostep-cas = "ostepdemos.atomic:main"
ostep-lottery = "ostepdemos.lottery:main"
ostep-pstack = "ostepdemos.pstack:main"
ostep-udp-client = "ostepdemos.dist:client_main"
ostep-udp-server = "ostepdemos.dist:server_main"
ostep-processes = "ostepdemos.processes:main"
ostep-intro = "ostepdemos.intro:main"
ostep-benchmarks = "ostepdemos.benchmarks:main"
ostep-threads = "ostepdemos.threads_demo:main"
ostep-bugs = "ostepdemos.bugs:main"

[tool.hatch.build.targets.wheel]
packages = ["ostepdemos"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
