"""Allow ``python -m archive_cli``."""

from archive_cli.cli.main import app

if __name__ == "__main__":
    app(prog_name="archive")
