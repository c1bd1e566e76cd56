"""Command-line entry point for aicoder."""

from __future__ import annotations

import click

from aicoder.config import ConfigError, get_config
from aicoder.openai_client import dispose_client
from aicoder.refactor import refactor as run_refactor
from aicoder.scaffolder import scaffold

BANNER = """
 █████╗ ██╗ ██████╗ ██████╗ ██████╗ ███████╗██████╗ 
██╔══██╗██║██╔════╝██╔═══██╗██╔══██╗██╔════╝██╔══██╗
███████║██║██║     ██║   ██║██║  ██║█████╗  ██████╔╝
██╔══██║██║██║     ██║   ██║██║  ██║██╔══╝  ██╔══██╗
██║  ██║██║╚██████╗╚██████╔╝██████╔╝███████╗██║  ██║
╚═╝  ╚═╝╚═╝ ╚═════╝ ╚═════╝ ╚═════╝ ╚══════╝╚═╝  ╚═╝"""


class _AliasedGroup(click.Group):
    """Group that also accepts short aliases for its commands."""

    aliases = {"co": "code", "re": "refactor"}

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        return super().get_command(ctx, self.aliases.get(cmd_name, cmd_name))


@click.group(
    cls=_AliasedGroup,
    invoke_without_command=True,
    short_help="aicoder CLI tool to generate or refactor code",
    help="aicoder a command-line tool to generate or refactor code using AI from a user's prompt",
)
@click.pass_context
def cli(ctx: click.Context) -> None:
    if ctx.invoked_subcommand is not None:
        return
    click.echo(click.style(BANNER, fg="yellow"), nl=False)
    click.echo("\nUse 'aicoder --help' for more information about using the tool.")
    click.echo(click.style("\nTry:", fg="yellow"))
    click.echo(
        click.style(
            '  aicoder code -p "Create a Python FastAPI application to manage customer."',
            fg="cyan",
        )
    )


@cli.command(
    "code",
    short_help="Generate code from a prompt",
    help="Scaffold new code from a prompt using AI",
)
@click.option("-p", "--prompt", required=True, help="Prompt for the CLI")
def code_command(prompt: str) -> None:
    if not prompt:
        click.echo("Error: --prompt or -p flag is required")
        return
    scaffold(prompt)


@cli.command("refactor", help="Evaluate and refactor code for clarity and complexity")
@click.option("-f", "--file", "file_path", default="", help="The file path to sanitize [required]")
@click.option("-o", "--output", default="", help="The output file path and name")
def refactor_command(file_path: str, output: str) -> None:
    if not file_path:
        click.echo("Please provide a command. Example:")
        click.echo(click.style("aicoder re -f app.py -o app_sanitized.py", fg="cyan"))
        return
    run_refactor(file_path, output)


def main(argv: list[str] | None = None) -> int:
    """Load the configuration, run the command line and return an exit code."""
    try:
        get_config()
    except ConfigError as exc:
        click.echo(str(exc), err=True)
        return 1

    try:
        result = cli.main(args=argv, prog_name="aicoder", standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted!", err=True)
        return 1
    finally:
        dispose_client()
    return result if isinstance(result, int) else 0