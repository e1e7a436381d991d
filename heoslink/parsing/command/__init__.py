from heoslink.parsing.command.decode import CommandIdentifier, PATH_SEPARATOR, parse_command

__all__ = ["CommandIdentifier", "PATH_SEPARATOR", "parse_command"]
