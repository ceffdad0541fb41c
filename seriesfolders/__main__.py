"""Module entrypoint for ``python -m seriesfolders``.

All argument parsing and browser setup happen in ``seriesfolders.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
