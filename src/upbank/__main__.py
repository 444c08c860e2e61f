"""Allow ``python -m upbank``."""

from upbank.cli.main import main

if __name__ == "__main__":
    main()
