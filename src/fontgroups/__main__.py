"""Allow running fontgroups with ``python -m fontgroups``."""

from fontgroups.cli import cli

if __name__ == "__main__":
    cli()
