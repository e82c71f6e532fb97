"""
Command configuration for the Android resource tool.
"""

from dataclasses import dataclass
from pathlib import Path

COMMANDS = ("ls", "cp", "mv")

# Long names accepted on the command line
COMMAND_ALIASES = {
    "list": "ls",
    "copy": "cp",
    "move": "mv",
}


@dataclass(frozen=True)
class ResConfig:
    """
    Parsed arguments for one invocation of ls, cp or mv.

    dest is only set for cp and mv.
    """
    command: str
    res_type: str
    sources: tuple[Path, ...]
    dest: Path | None = None
    dry_run: bool = False
    progress: bool = False
    verbose: bool = False

    def __post_init__(self):
        if self.command not in COMMANDS:
            raise ValueError(f"Unknown command: {self.command}")
        if not self.sources:
            raise ValueError("At least one source is required")
        if self.command != "ls" and self.dest is None:
            raise ValueError(f"'{self.command}' requires a destination")

    @property
    def delete_source(self) -> bool:
        return self.command == "mv"

    @classmethod
    def from_args(cls, args) -> "ResConfig":
        """
        Create a ResConfig from an argparse namespace.

        For cp and mv the last positional path is the destination.
        """
        command = COMMAND_ALIASES.get(args.command, args.command)
        paths = [Path(p) for p in args.paths]

        if command == "ls":
            sources, dest = paths, None
        else:
            if len(paths) < 2:
                raise ValueError(f"'{command}' requires at least one source and a destination")
            sources, dest = paths[:-1], paths[-1]

        return cls(
            command=command,
            res_type=args.type,
            sources=tuple(sources),
            dest=dest,
            dry_run=getattr(args, "dry_run", False),
            progress=getattr(args, "progress", False),
            verbose=getattr(args, "verbose", False),
        )
