"""Allow ``python -m pattern_catalogue``."""

from pattern_catalogue.cli.main import main

if __name__ == "__main__":
    main()
