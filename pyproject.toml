[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "drills"
version = "0.1.0"
description = "Small programming exercises: savings, rectangles, bits, text, Caesar cipher, matrices, minesweeper and poker hand evaluation"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "exercises",
    "caesar-cipher",
    "minesweeper",
    "poker",
    "matrix",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
drills-retirement = "drills.retirement:main"
drills-rectangle = "drills.rectangle:main"
drills-encrypt = "drills.caesar:encrypt_main"
drills-break = "drills.caesar:break_main"
drills-rotate = "drills.matrix:main"
drills-sortlines = "drills.sortlines:main"
drills-minesweeper = "drills.minesweeper:main"
drills-keycounts = "drills.keycounts:main"

[tool.hatch.build.targets.wheel]
packages = ["drills"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
