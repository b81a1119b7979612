"""Allow ``python -m cicd360`` to run the CLI."""

from .cli import main

if __name__ == "__main__":
    main()
