"""Generate or refactor code from a prompt using a chat-completion API."""

__version__ = "0.1.0"