"""Allow ``python -m basics_cli``."""

from basics_cli.cli import main

if __name__ == "__main__":
    main()
