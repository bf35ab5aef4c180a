"""ccopy CLI entry point."""

from ccopy.cli import app

if __name__ == "__main__":
    app()
