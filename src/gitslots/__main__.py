"""Allow ``python -m gitslots``."""

from gitslots.ui.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
