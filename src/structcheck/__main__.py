"""`python -m structcheck`."""

from structcheck.presentation.cli.main import run

if __name__ == "__main__":
    run()
