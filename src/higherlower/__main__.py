"""Allow ``python -m higherlower``."""

from higherlower.cli.play import main

if __name__ == "__main__":
    main()
