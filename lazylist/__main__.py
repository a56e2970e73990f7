"""Module entrypoint for ``python -m lazylist``."""

from .cli import main


if __name__ == "__main__":
    main()
