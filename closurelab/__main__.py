"""Allow ``python -m closurelab``."""
import sys

from closurelab.runner import main

if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main(sys.argv))
