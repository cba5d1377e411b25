import click

from galias.core.context import GaliasContext

HELP_TEXT = "\n".join(
    [
        "Requirements and installation instructions:",
        "\tgit: https://git-scm.com/downloads",
        "\thub: https://github.com/github/hub",
        "Example usage:",
        "\tList your branches, ordered by commit date:",
        "\t\t$ g mb",
        "\tCreate a pull request with title and description for target branch <branch>:",
        '\t\t$ g pr "<title>" <branch> "[description]"',
        "\tStash your changes under a name, then restore them later on the same branch:",
        '\t\t$ g st "<name>"',
        '\t\t$ g sp "<name>"',
        "\tSwitch to a branch, creating it from the current branch if needed:",
        "\t\t$ g co <branch>",
        "\nRun `g` without arguments to list every command alias.",
    ]
)


def help_cmd(ctx: GaliasContext, opts: tuple[str, ...]) -> None:
    """Print usage text."""
    click.echo(HELP_TEXT)
