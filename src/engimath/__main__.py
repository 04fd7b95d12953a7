"""Command-line interface."""
from engimath.main import run

if __name__ == "__main__":
    run()
