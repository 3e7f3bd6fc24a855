"""Module entrypoint for ``python -m mailsidebar``."""

from .cli import main


if __name__ == "__main__":
    main()
