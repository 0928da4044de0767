"""
Lint script runner.

Runs each checker over the package and the playground entry script, stopping
at the first one that reports problems.
"""
import subprocess
import sys

TARGETS = ["./closurelab", "./playground.py"]

CHECKS = {
    "flake8": ["flake8", *TARGETS, "--max-line-length=100", "--exclude=closurelab/tests"],
    "pylint": ["pylint", *TARGETS, "--ignore=tests", "--disable=missing-function-docstring"],
}


def main() -> int:
    """
    Lint the ClosureLab project. Returns the exit code of the failing check.
    """
    for name, command in CHECKS.items():
        print(f"Running {name}...")
        completed = subprocess.run(command, check=False)
        if completed.returncode:
            print(f"{name} reported problems")
            return completed.returncode
    return 0


if __name__ == "__main__":
    sys.exit(main())
