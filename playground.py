"""
ClosureLab Playground

This is the main entry point for running the closures tutorial from a checkout.

Workflow:
1. A registry is built holding every lesson in teaching order.
2. Each lesson runs in turn; a failing lesson is reported and the run goes on.
3. Output lines are printed as ``[lesson] text``.
"""
import sys

from closurelab.runner import main


if __name__ == "__main__":
    sys.exit(main(sys.argv))
