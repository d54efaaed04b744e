[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cascade_client"
version = "0.1.0"
description = "Core of a monitoring client: time points, alerts, sensors, pages and device connections."
requires-python = ">=3.10"
keywords = ["monitoring", "alerts", "sensors", "serial", "tcp"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]
dependencies = [
    "pyserial",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["cascade_client"]

[tool.pytest.ini_options]
addopts = "-ra"
