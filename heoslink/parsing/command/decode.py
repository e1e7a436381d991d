"""
Parser for the ``heos.command`` path.

A command path names the request a response answers, e.g.
``player/get_players``. Only the first two segments are significant.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from heoslink.parsing.errors import CommandPathError

PATH_SEPARATOR = "/"


class CommandIdentifier(BaseModel):
    """
    The (group, command) pair identifying a HEOS command.

    Attributes:
        group: The command group, e.g. ``"player"``.
        command: The command name within the group, e.g. ``"get_players"``.
    """
    model_config = ConfigDict(frozen=True)

    group: str
    command: str

    def __str__(self) -> str:
        return f"{self.group}{PATH_SEPARATOR}{self.command}"

    def as_dict(self) -> dict[str, str]:
        return {"group": self.group, "command": self.command}


def parse_command(path: str, *, lenient: bool = False) -> CommandIdentifier:
    """
    Split a command path into its group and command segments.

    Segments beyond the second are ignored.

    Args:
        path: The raw ``heos.command`` string.
        lenient: When true, missing segments become empty strings instead
            of raising.

    Returns:
        The parsed ``CommandIdentifier``.

    Raises:
        CommandPathError: If the path has no ``/`` separator and ``lenient``
            is false.
    """
    segments = path.split(PATH_SEPARATOR)
    if len(segments) < 2:
        if not lenient:
            raise CommandPathError(path)
        segments.append("")
    return CommandIdentifier(group=segments[0], command=segments[1])
