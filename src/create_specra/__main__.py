"""Allow ``python -m create_specra``."""

from create_specra.cli import main

if __name__ == "__main__":
    main()
