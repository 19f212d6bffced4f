[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "alertsink"
version = "0.1.0"
description = "Alert output channels, a timeout watchdog and a periodic capture-stats writer for security monitoring pipelines"
requires-python = ">=3.10"
dependencies = []
keywords = ["alerts", "outputs", "syslog", "watchdog", "monitoring", "security"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
    "Topic :: System :: Logging",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["alertsink"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
