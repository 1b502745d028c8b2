"""Allow ``python -m dtdrafts``."""

from dtdrafts.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
