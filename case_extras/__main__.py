"""Package entry point for ``python -m case_extras``."""

from case_extras.cli import main

if __name__ == "__main__":
    main()
