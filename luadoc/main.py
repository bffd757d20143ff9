"""Entry point for the Lua Documentation Generator.

Delegates to the click command group, which loads configuration and
sets up logging before running a subcommand.
"""

from luadoc.cli.commands import luadoc


def main() -> None:
    """Launch the CLI."""
    luadoc(prog_name="luadoc")


if __name__ == "__main__":
    main()
