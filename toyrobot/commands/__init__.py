"""
Commands package for toyrobot.

Modules here are imported by the command registry on first lookup; each
command class registers itself with @register_command.
"""
