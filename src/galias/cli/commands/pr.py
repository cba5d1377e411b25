from galias.cli.ensure import MissingArgumentError
from galias.core.context import GaliasContext


def pull_request_cmd(ctx: GaliasContext, opts: tuple[str, ...]) -> None:
    """Open a pull request with hub.

    Options, in order: title, base branch, optional description, and an
    optional fourth value that opens the new pull request in the browser.
    """
    title = opts[0] if len(opts) > 0 else ""
    base_branch = opts[1] if len(opts) > 1 else ""
    description = opts[2] if len(opts) > 2 else ""
    open_in_browser = len(opts) > 3 and bool(opts[3])

    if not title.strip() or not base_branch.strip():
        raise MissingArgumentError("title and/or base branch")

    cmd = ["hub", "pull-request", "-m", title]
    if description.strip():
        cmd.extend(["-m", description])
    cmd.extend(["-b", base_branch])
    if open_in_browser:
        cmd.append("-o")

    ctx.process.run(
        cmd,
        operation_context=f"create pull request against '{base_branch}'",
        echo=True,
    )
