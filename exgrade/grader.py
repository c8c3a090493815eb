"""Grade exercises listed in a JSON config and write a JSON report."""

from __future__ import annotations

import json
import shutil
import subprocess
import sys
import time
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Iterator

CONFIG_FILE = "exercise_config.json"
REPORT_FILE = "report.json"
EXERCISES_ROOT = Path("./exercises")

_GREEN = "\x1b[32m"
_RED = "\x1b[31m"
_RESET = "\x1b[0m"

_LEVELS = ("easy", "normal", "hard")


@dataclass
class Exercise:
    """One exercise entry of the config file."""

    name: str
    path: str
    exercise_type: str
    score: int


@dataclass
class ExerciseConfig:
    """Exercises grouped by difficulty."""

    easy: list[Exercise]
    normal: list[Exercise]
    hard: list[Exercise]

    def __iter__(self) -> Iterator[Exercise]:
        yield from self.easy
        yield from self.normal
        yield from self.hard


@dataclass
class ExerciseResult:
    """Outcome of grading one exercise."""

    name: str
    result: bool
    score: int


@dataclass
class Statistics:
    """Totals over a grading run."""

    total_exercises: int = 0
    total_successes: int = 0
    total_failures: int = 0
    total_score: int = 0
    total_time: int = 0


@dataclass
class Report:
    """Per-exercise results and overall statistics."""

    exercises: list[ExerciseResult] = field(default_factory=list)
    statistics: Statistics = field(default_factory=Statistics)


def _require(raw: dict, key: str, kind: type, where: str):
    if key not in raw:
        raise ValueError(f"missing field `{key}` in {where}")
    value = raw[key]
    if kind is int:
        valid = isinstance(value, int) and not isinstance(value, bool)
    else:
        valid = isinstance(value, kind)
    if not valid:
        raise ValueError(f"field `{key}` in {where} has the wrong type")
    return value


def _parse_exercise(raw: object) -> Exercise:
    if not isinstance(raw, dict):
        raise ValueError("an exercise entry must be an object")
    where = "exercise"
    return Exercise(
        name=_require(raw, "name", str, where),
        path=_require(raw, "path", str, where),
        exercise_type=_require(raw, "type", str, where),
        score=_require(raw, "score", int, where),
    )


def load_exercise_config(file_path) -> ExerciseConfig:
    """Read the exercise config; raise OSError or ValueError on failure."""
    with open(file_path, encoding="utf-8") as handle:
        data = json.load(handle)
    if not isinstance(data, dict):
        raise ValueError("the config must be a JSON object")
    levels = {}
    for level in _LEVELS:
        entries = _require(data, level, list, "config")
        levels[level] = [_parse_exercise(entry) for entry in entries]
    return ExerciseConfig(**levels)


def evaluate_exercises_from_config(mode, config: ExerciseConfig, report: Report) -> None:
    """Grade every exercise in order, recording results in the report."""
    stats = report.statistics
    for exercise in config:
        print(f"\nEvaluating {exercise.exercise_type}: {exercise.name}")
        passed = evaluate_exercise(exercise)
        score = exercise.score if passed else 0
        report.exercises.append(ExerciseResult(exercise.name, passed, score))
        if passed:
            stats.total_successes += 1
        else:
            stats.total_failures += 1
        stats.total_score += score
        if mode == "watch" and not ask_to_continue():
            break


def evaluate_exercise(exercise: Exercise) -> bool:
    """Grade one exercise according to its type."""
    exercise_path = EXERCISES_ROOT / exercise.path
    if exercise.exercise_type == "single_file":
        return evaluate_single_file(exercise_path)
    if exercise.exercise_type == "cargo_project":
        return evaluate_cargo_project(exercise_path)
    print(f"Unknown exercise type: {exercise.exercise_type}", file=sys.stderr)
    return False


def evaluate_single_file(file_path) -> bool:
    """Compile a single source file as a test binary, run it, then remove it."""
    file_path = Path(file_path)
    test_binary = file_path.with_suffix("")
    try:
        compiled = subprocess.run(
            ["rustc", "--test", str(file_path), "-o", str(test_binary)],
            capture_output=True,
        )
    except OSError:
        print(f"Error executing rustc --test for {file_path}", file=sys.stderr)
        return False

    if compiled.returncode != 0:
        print(f"{_RED}{file_path}: COMPILATION FAILED{_RESET}", file=sys.stderr)
        return False

    try:
        run = subprocess.run([str(test_binary)], capture_output=True)
    except OSError:
        print(f"Error running test executable for {file_path}", file=sys.stderr)
        passed = False
    else:
        passed = run.returncode == 0
        if passed:
            print(f"{_GREEN}{file_path}: TEST PASSED{_RESET}")
        else:
            print(f"{_RED}{file_path}: TEST FAILED{_RESET}")

    try:
        test_binary.unlink()
    except OSError as err:
        print(f"Failed to remove test binary {test_binary}: {err}", file=sys.stderr)
    else:
        print(f"Successfully removed test binary: {test_binary}")

    return passed


def evaluate_cargo_project(proj_path) -> bool:
    """Build, test and lint a cargo project; all three must succeed."""
    proj_path = Path(proj_path)
    outcomes = [run_cargo_command(proj_path, command) for command in ("build", "test", "clippy")]
    passed = all(outcomes)
    if passed:
        print(f"{_GREEN}{proj_path}: PASSED{_RESET}")
    else:
        print(f"{_RED}{proj_path}: FAILED{_RESET}")
    clean_target_directory(proj_path)
    return passed


def run_cargo_command(proj_path, command) -> bool:
    """Run one cargo subcommand in the project directory."""
    try:
        completed = subprocess.run(["cargo", command], cwd=proj_path, capture_output=True)
    except OSError:
        return False
    return completed.returncode == 0


def clean_target_directory(proj_path) -> None:
    """Remove the project's build output directory if present."""
    proj_path = Path(proj_path)
    target_dir = proj_path / "target"
    if not target_dir.exists():
        return
    try:
        shutil.rmtree(target_dir)
    except OSError as err:
        print(f"Failed to clean up target directory: {err}", file=sys.stderr)
    else:
        print(f"Successfully cleaned up target directory in: {proj_path}")


def ask_to_continue() -> bool:
    """Ask the user whether to go on; 'q' quits."""
    print("\nPress any key to continue, or 'q' to quit.")
    try:
        answer = input()
    except EOFError:
        answer = ""
    return answer.strip().lower() != "q"


def save_report_to_json(file_name, report: Report) -> None:
    """Write the report as indented JSON."""
    with open(file_name, "w", encoding="utf-8") as handle:
        json.dump(asdict(report), handle, indent=2, ensure_ascii=False)


def main(argv=None) -> int:
    """Run the grader: 'watch' asks after each exercise, anything else runs all."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Please provide a command: 'watch' or 'all'", file=sys.stderr)
        return 1

    mode = args[0]
    start = time.monotonic()

    try:
        config = load_exercise_config(CONFIG_FILE)
    except (OSError, ValueError) as err:
        print(f"Failed to load config file: {err}", file=sys.stderr)
        return 1

    report = Report()
    evaluate_exercises_from_config(mode, config, report)

    stats = report.statistics
    stats.total_time = int(time.monotonic() - start)
    stats.total_exercises = stats.total_successes + stats.total_failures

    print("\nSummary:")
    print(f"Total exercises: {stats.total_exercises}")
    print(f"Total successes: {stats.total_successes}")
    print(f"Total failures: {stats.total_failures}")
    print(f"Total score: {stats.total_score}")

    try:
        save_report_to_json(REPORT_FILE, report)
    except OSError as err:
        print(f"Error saving report: {err}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())