"""Run script.

Why it exists:
- Lets `python -m main` work from inside `src/` during development.
- Keeps a plain entry point next to the `bundle-matrix` console script.
"""

from __future__ import annotations

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
