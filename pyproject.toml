[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cardesign"
version = "0.1.0"
description = "Small worked examples of object-oriented design: cars that start, accelerate and brake, and a composable document editor"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "object-oriented design",
    "abstraction",
    "encapsulation",
    "inheritance",
    "polymorphism",
    "examples",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cardesign-abstraction = "cardesign.abstraction:main"
cardesign-encapsulation = "cardesign.encapsulation:main"
cardesign-inheritance = "cardesign.inheritance:main"
cardesign-polymorphism = "cardesign.polymorphism:main"
cardesign-fleet = "cardesign.fleet:main"
cardesign-manual-car = "cardesign.manual_car:main"
cardesign-naive-editor = "cardesign.naive_editor:main"
cardesign-documents = "cardesign.documents:main"

[tool.hatch.build.targets.wheel]
packages = ["cardesign"]

[tool.pytest.ini_options]
addopts = "-ra"
