"""
Command registration system with decorator support.

This module provides a centralized registry for all commands, enabling
auto-discovery and registration through decorators. Dispatch is strictly on
the command name; each command class owns its argument count and parsing.
"""

from __future__ import annotations

import logging
import pkgutil
from collections.abc import Callable
from importlib import import_module

from toyrobot.commands.base import CommandBase
from toyrobot.config import TRACE

logger = logging.getLogger(__name__)

COMMANDS_PACKAGE = "toyrobot.commands"


class CommandRegistry:
    """
    Singleton registry for command classes.

    Commands register themselves using the @register_command decorator.
    The registry imports every module of the commands package on first
    lookup so that the decorators run.
    """

    _instance: CommandRegistry | None = None
    _commands: dict[str, type[CommandBase]] = {}
    _discovered: bool = False

    def __new__(cls) -> CommandRegistry:
        """Ensure singleton pattern."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize the registry (only runs once due to singleton)."""
        if not hasattr(self, "_initialized"):
            self._commands = {}
            self._discovered = False
            self._initialized = True

    def register(self, name: str, command_class: type[CommandBase]) -> None:
        """
        Register a command class with the given name.

        Args:
            name: The command name, uppercase (e.g. "PLACE")
            command_class: The command class to register

        Raises:
            ValueError: If a different class is already registered under the name
        """
        if name in self._commands:
            existing = self._commands[name]
            if existing is not command_class:
                raise ValueError(
                    f"Command '{name}' is already registered with class {existing.__name__}. "
                    f"Cannot register with {command_class.__name__}"
                )
        else:
            self._commands[name] = command_class
            logger.debug(f"Registered command '{name}' -> {command_class.__name__}")

    def get_command_class(self, name: str) -> type[CommandBase] | None:
        """
        Retrieve a command class by name.

        Returns:
            The command class if found, None otherwise
        """
        if not self._discovered:
            self.discover_commands()
        return self._commands.get(name.upper())

    def list_registered_commands(self) -> list[str]:
        """Return all registered command names, sorted."""
        if not self._discovered:
            self.discover_commands()
        return sorted(self._commands.keys())

    def discover_commands(self) -> None:
        """
        Auto-discover and register all decorated commands.

        Imports every module in the commands package (except base) to trigger
        the @register_command decorators.
        """
        if self._discovered:
            return

        logger.debug("Discovering commands...")

        commands_package = import_module(COMMANDS_PACKAGE)
        for _importer, modname, ispkg in pkgutil.iter_modules(commands_package.__path__):
            if ispkg or modname == "base":
                continue
            full_module_name = f"{COMMANDS_PACKAGE}.{modname}"
            import_module(full_module_name)
            logger.log(TRACE, "Imported command module: %s", full_module_name)

        self._discovered = True
        logger.debug(f"Command discovery complete. {len(self._commands)} commands registered.")

    def create_command_from_parts(
        self, parts: list[str]
    ) -> tuple[CommandBase | None, str | None]:
        """
        Create a command instance from pre-split tokens.

        Args:
            parts: Tokens, command name first

        Returns:
            A tuple of (command, error_message):
            - (command, None) if the name, arity and arguments are valid
            - (None, None) if the command name is not registered
            - (None, error_message) if the command is recognized but rejected
        """
        if not parts:
            logger.debug("Empty command tokens")
            return None, None

        command_name = parts[0].upper()
        logger.log(TRACE, "match_start name=%s parts=%d", command_name, len(parts))

        command_class = self.get_command_class(command_name)
        if command_class is None:
            logger.log(TRACE, "match_unknown name=%s", command_name)
            return None, None

        command = command_class()
        can_handle, error = command.match(parts)
        if can_handle:
            logger.log(TRACE, "match_ok name=%s", command_name)
            return command, None

        logger.debug(f"Command '{command_name}' rejected: {command.error_message}")
        return None, error


# Global registry instance
_registry = CommandRegistry()


def register_command(name: str) -> Callable[[type[CommandBase]], type[CommandBase]]:
    """
    Decorator to register a command class.

    Usage:
        @register_command("MOVE")
        class MoveCommand(MotionCommand):
            ...

    Args:
        name: The command name

    Returns:
        Decorator function that registers the class
    """

    def decorator(cls: type[CommandBase]) -> type[CommandBase]:
        if not issubclass(cls, CommandBase):
            raise TypeError(f"Class {cls.__name__} must inherit from CommandBase")

        _registry.register(name, cls)
        cls._registered_name = name
        return cls

    return decorator


# Module-level convenience functions that delegate to the registry singleton
get_command_class = _registry.get_command_class
list_registered_commands = _registry.list_registered_commands
discover_commands = _registry.discover_commands
create_command_from_parts = _registry.create_command_from_parts
