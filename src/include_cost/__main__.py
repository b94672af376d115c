"""Allow ``python -m include_cost``."""

from .cli import app

if __name__ == "__main__":
    app()
