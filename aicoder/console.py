"""Interactive prompts on the terminal."""

import click


def ask_for_confirmation(message: str) -> bool:
    """Ask a yes/no question; only ``y`` or ``Y`` counts as yes."""
    click.secho(f"{message} (y/n): ", fg="yellow", nl=False)
    try:
        words = input().split()
    except EOFError:
        return False
    return words[:1] in (["y"], ["Y"])