"""Command-line entry point: ``python -m mycadlib``."""

from mycadlib.demo import main

if __name__ == "__main__":
    raise SystemExit(main())
