[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cmadness"
version = "0.1.0"
description = "A small threaded static-file HTTP server and a minimal Whitted-style ray tracer"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "web server", "static files", "ray tracing", "ppm"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: No Input/Output (Daemon)",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cmadness-serve = "cmadness.webserver.web_cli:main"
cmadness-raytrace = "cmadness.raytracer.ppm_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cmadness"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
