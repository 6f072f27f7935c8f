"""Allow running as ``python -m pagemeta <url>``."""

from pagemeta.cli import app

if __name__ == "__main__":
    app()
