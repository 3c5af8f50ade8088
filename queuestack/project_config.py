"""Project-level configuration stored in ``.queuestack`` at the project root."""

from __future__ import annotations

import tomllib
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

import tomli_w

from .global_config import ConfigError

PROJECT_CONFIG_FILE = ".queuestack"

_FIELD_TYPES: dict[str, type] = {
    "user_name": str,
    "use_git_user": bool,
    "editor": str,
    "interactive": bool,
    "id_pattern": str,
    "stack_dir": str,
    "archive_dir": str,
    "template_dir": str,
}

_HEADER = (
    "queuestack project settings.",
    "Values set here take precedence over ~/.queuestack for this project only.",
    "Every option below is disabled; uncomment a line to override it.",
)

_ID_TOKENS = (
    "Tokens understood in id_pattern:",
    "  %y  two-digit year        %m  two-digit month",
    "  %d  two-digit day         %j  three-digit day of year",
    "  %T  four Base32 characters for the seconds since midnight (UTC)",
    "  %R  one random Base32 character per R (%RRR gives three)",
    "  %%  a literal percent sign",
)

_OPTIONS: tuple[tuple[str, str, tuple[str, ...]], ...] = (
    ("user_name", '"Your Name"', ("Author name written into new items.",)),
    ("use_git_user", "true", ("Fall back to `git config user.name` when no name is set.",)),
    ("editor", '"nvim"', ("Command used to open items for editing.",)),
    ("interactive", "true", ("Open the editor and selection dialogs automatically.",)),
    ("id_pattern", '"%y%m%d-%T%RRR"', ("Pattern for new item IDs.", *_ID_TOKENS)),
    ("stack_dir", '"queuestack"', ("Folder holding the items, relative to the project root.",)),
    ("archive_dir", '".archive"', ("Folder for closed items, inside the stack folder.",)),
    ("template_dir", '".templates"', ("Folder for templates, inside the stack folder.",)),
)


def _commented_template() -> str:
    blocks = ["\n".join(f"# {line}" for line in _HEADER)]
    for key, example, notes in _OPTIONS:
        lines = [f"# {note}".rstrip() for note in notes]
        lines.append(f"# {key} = {example}")
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks) + "\n"


@dataclass
class ProjectConfig:
    """Per-project overrides; every unset field falls back to the global config."""

    user_name: str | None = None
    use_git_user: bool | None = None
    editor: str | None = None
    interactive: bool | None = None
    id_pattern: str | None = None
    stack_dir: str | None = None
    archive_dir: str | None = None
    template_dir: str | None = None

    @staticmethod
    def find_project_root(start: str | Path | None = None) -> Path | None:
        """Search upward from ``start`` (default: the working directory) for a project."""
        if start is None:
            try:
                current = Path.cwd()
            except OSError:
                return None
        else:
            current = Path(start).absolute()
        for directory in (current, *current.parents):
            if (directory / PROJECT_CONFIG_FILE).exists():
                return directory
        return None

    @staticmethod
    def path(project_root: str | Path) -> Path:
        """Location of the project config file inside ``project_root``."""
        return Path(project_root) / PROJECT_CONFIG_FILE

    @classmethod
    def from_toml(cls, text: str) -> ProjectConfig:
        """Parse TOML text; absent fields stay unset and unknown fields are ignored."""
        try:
            table: dict[str, Any] = tomllib.loads(text)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid TOML: {exc}") from exc

        values: dict[str, Any] = {}
        for name, kind in _FIELD_TYPES.items():
            value = table.get(name)
            if value is None:
                continue
            if not isinstance(value, kind):
                raise ConfigError(
                    f"Invalid type for '{name}': expected {kind.__name__}, "
                    f"got {type(value).__name__}"
                )
            values[name] = value
        return cls(**values)

    @classmethod
    def load(cls, project_root: str | Path) -> ProjectConfig:
        """Load the project config, or an empty one if the file does not exist."""
        path = cls.path(project_root)
        if not path.exists():
            return cls()
        try:
            content = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"Failed to read project config: {path}: {exc}") from exc
        try:
            return cls.from_toml(content)
        except ConfigError as exc:
            raise ConfigError(f"Failed to parse project config: {path}: {exc}") from exc

    def save(self, project_root: str | Path) -> None:
        """Write the set fields as plain TOML."""
        path = self.path(project_root)
        data = {key: value for key, value in asdict(self).items() if value is not None}
        try:
            path.write_text(tomli_w.dumps(data), encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"Failed to write project config: {path}: {exc}") from exc

    @classmethod
    def save_with_comments(cls, project_root: str | Path) -> None:
        """Write a config file with every option documented and commented out."""
        path = cls.path(project_root)
        try:
            path.write_text(_commented_template(), encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"Failed to write project config: {path}: {exc}") from exc