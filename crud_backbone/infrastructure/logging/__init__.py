"""Logging adapters implementing LoggerProtocol."""

from crud_backbone.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
