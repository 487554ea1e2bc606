"""Allow running as: python -m reqcheck"""

from reqcheck.main import cli

if __name__ == "__main__":
    cli()
