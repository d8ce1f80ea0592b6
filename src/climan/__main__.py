"""``python -m climan``: same as the ``climan`` console script."""

from climan.cli import main

if __name__ == "__main__":
    main()
