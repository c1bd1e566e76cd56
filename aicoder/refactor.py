"""Evaluate a source file with the AI service and offer an improved version."""

from __future__ import annotations

from pathlib import Path

import click

from aicoder.config import get_config
from aicoder.console import ask_for_confirmation
from aicoder.models import (
    Message,
    ResponseParseError,
    SanitizerResponse,
    parse_sanitizer_response,
)
from aicoder.openai_client import ChatCompletionError, chat_completion

_TEMPERATURE = 0.1
_READABILITY_THRESHOLD = 5
_CYCLOMATIC_THRESHOLD = 5


def sanitized_path(file: str) -> str | None:
    """Derive the default output name by adding ``_sanitized`` before the extension.

    Only the text before the first dot and the part after it are kept.
    Returns None when the name has no usable stem or extension.
    """
    parts = file.split(".")
    if len(parts) >= 2 and parts[0] and parts[1]:
        return f"{parts[0]}_sanitized.{parts[1]}"
    return None


def _score_line(label: str, score: int, bad: bool) -> None:
    click.echo(label, nl=False)
    click.echo(click.style(str(score), fg="red" if bad else "cyan"))


def report_results(response: SanitizerResponse) -> None:
    """Print the readability and cyclomatic complexity evaluation."""
    click.echo("\nCode information:\n")

    _score_line(
        "Readability score: ",
        response.readability_score,
        response.readability_score < _READABILITY_THRESHOLD,
    )
    click.echo("Readability score reason:")
    click.echo(click.style(response.readability_reason, fg="cyan"))

    _score_line(
        "\nCyclomatic complexity score: ",
        response.cyclomatic_score,
        response.cyclomatic_score > _CYCLOMATIC_THRESHOLD,
    )
    click.echo("Cyclomatic complexity score reason:")
    click.echo(click.style(response.cyclomatic_reason, fg="cyan"))


def refactor(file: str, output: str = "") -> Path | None:
    """Run the refactoring workflow for ``file``.

    Returns the path written, or None when nothing was written.
    """
    settings = get_config()

    try:
        data = Path(file).read_bytes()
    except OSError as exc:
        click.echo(f"Error reading the input file: {exc}")
        return None

    source = data.decode("utf-8", errors="replace")
    if not source:
        click.echo("The file is empty.")
        return None

    messages = [
        Message(role="system", content=settings.refactor_system_prompt),
        Message(role="user", content=source),
    ]

    try:
        payload = chat_completion(messages, settings.model, _TEMPERATURE, settings)
    except ChatCompletionError as exc:
        click.echo("Unable to generate a completion with error:")
        click.echo(click.style(str(exc), fg="red"))
        return None

    try:
        response = parse_sanitizer_response(payload)
    except ResponseParseError as exc:
        click.echo("Unable to parse the command with error:")
        click.echo(click.style(str(exc), fg="red"))
        click.echo(f"Failed Payload:\n {payload}")
        return None

    report_results(response)

    if not response.improved_code:
        click.echo("No code was generated.")
        return None

    if not ask_for_confirmation("\nContinue to view the proposed code?"):
        return None

    click.echo("\nProposed code changes:\n")
    click.echo(click.style(response.improved_code, fg="green"))

    if not ask_for_confirmation("Write the code to a file?"):
        return None

    target = output or sanitized_path(file)
    if not target:
        return None

    click.echo(f"Writing file: {target}")
    destination = Path(target)
    try:
        destination.write_bytes(response.improved_code.encode("utf-8"))
    except OSError as exc:
        click.echo(click.style(f"error writing file {target}: {exc}", fg="red"))
        return None
    return destination