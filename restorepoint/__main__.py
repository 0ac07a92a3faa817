"""Module entrypoint for ``python -m restorepoint``."""

from .cli import main


if __name__ == "__main__":
    main()
