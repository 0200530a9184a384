"""Interpreter, command registry, reader and robot state."""
