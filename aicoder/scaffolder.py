"""Generate new project files from a prompt."""

from __future__ import annotations

import os
from pathlib import Path

import click

from aicoder.config import get_config
from aicoder.console import ask_for_confirmation
from aicoder.models import CodeFiles, Message, ResponseParseError, parse_code_files
from aicoder.openai_client import ChatCompletionError, chat_completion


def create_folder_if_not_exists(file_path: str | os.PathLike[str]) -> None:
    """Create the parent directory of ``file_path`` when it does not exist."""
    directory = os.path.dirname(os.fspath(file_path))
    if directory not in ("", ".") and not os.path.exists(directory):
        os.makedirs(directory)


def generate_code_files(prompt: str) -> CodeFiles:
    """Ask the AI service for files matching ``prompt``."""
    settings = get_config()
    messages = [
        Message("system", settings.code_system_prompt),
        Message("user", prompt),
    ]
    payload = chat_completion(messages, settings.model, 0.1, settings)
    try:
        return parse_code_files(payload)
    except ResponseParseError as exc:
        raise ResponseParseError(f"failed to parse response: {exc} (payload: {payload})") from exc


def display_code_files(code_files: CodeFiles) -> None:
    """Print every generated file with its path."""
    click.echo("Generated code:\n")
    for code_file in code_files:
        click.secho(f"File: {code_file.filepath}", fg="yellow")
        click.secho(code_file.code + "\n", fg="cyan")


def write_code_files(code_files: CodeFiles) -> list[Path]:
    """Write the files to disk, stopping at the first failure."""
    written = []
    for code_file in code_files:
        try:
            create_folder_if_not_exists(code_file.filepath)
        except OSError as exc:
            raise OSError(f"error creating directory for {code_file.filepath}: {exc}") from exc
        click.echo(f"Writing file: {code_file.filepath}")
        path = Path(code_file.filepath)
        try:
            path.write_bytes(code_file.code.encode("utf-8"))
        except OSError as exc:
            raise OSError(f"error writing file {code_file.filepath}: {exc}") from exc
        written.append(path)
    return written


def scaffold(prompt: str) -> list[Path]:
    """Generate, show and optionally write files; return the paths written."""
    try:
        code_files = generate_code_files(prompt)
    except (ChatCompletionError, ResponseParseError) as exc:
        click.echo("Unable to generate code:")
        click.secho(str(exc), fg="red")
        return []
    display_code_files(code_files)
    if not ask_for_confirmation("Do you want to write files?"):
        return []
    try:
        return write_code_files(code_files)
    except OSError as exc:
        click.secho(str(exc), fg="red")
        return []