[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "encid"
version = "1.5.0"
description = "Encrypted integer IDs: turn numbers into opaque, reversible strings using AES keys."
requires-python = ">=3.10"
keywords = ["id", "encryption", "aes", "obfuscation", "base30", "base50", "keystore", "sqlite"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "cryptography>=41",
    "platformdirs>=3",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
    "hypothesis>=6",
]

[project.scripts]
encid = "encid.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["encid"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
