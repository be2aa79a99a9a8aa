[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "orderdesk"
version = "0.1.0"
description = "Order objects, order tracking and order-entry helpers for limit order books"
requires-python = ">=3.10"
dependencies = []
keywords = ["order book", "trading", "orders", "order entry"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["orderdesk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
