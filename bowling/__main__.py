"""Run the bowling scorekeeper with `python -m bowling`."""

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
