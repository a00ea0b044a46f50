"""Allow ``python -m pathtracker``."""

from pathtracker.cli import main_entry

if __name__ == "__main__":
    main_entry()
