[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kubergrunt"
version = "0.1.0"
description = "Option parsing and validation for managing Kubernetes clusters, EKS workers and TLS secrets."
requires-python = ">=3.10"
dependencies = []
keywords = ["kubernetes", "eks", "kubectl", "tls", "options", "devops"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kubergrunt"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
