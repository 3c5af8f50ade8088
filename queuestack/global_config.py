"""Global user configuration stored in the home directory (``~/.queuestack``)."""

from __future__ import annotations

import sys
import threading
import tomllib
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

import tomli_w

from .constants import (
    DEFAULT_ARCHIVE_DIR,
    DEFAULT_STACK_DIR,
    DEFAULT_TEMPLATE_DIR,
    GLOBAL_CONFIG_FILE,
)
from .idgen import DEFAULT_PATTERN

VALID_FIELDS = (
    "user_name",
    "use_git_user",
    "editor",
    "interactive",
    "id_pattern",
    "stack_dir",
    "archive_dir",
    "template_dir",
)

# Fields that always carry a value in the file; user_name and editor stay commented when unset.
REQUIRED_FIELDS = (
    "use_git_user",
    "interactive",
    "id_pattern",
    "stack_dir",
    "archive_dir",
    "template_dir",
)

# (old_name, new_name)
LEGACY_ALIASES = (("default_id_pattern", "id_pattern"),)


class ConfigError(Exception):
    """Raised when a configuration file is missing, unreadable or invalid."""


@dataclass
class ConfigValidation:
    """What validating the global config file found."""

    missing: list[str] = field(default_factory=list)
    invalid: list[str] = field(default_factory=list)
    migrated: list[tuple[str, str]] = field(default_factory=list)

    def has_changes(self) -> bool:
        """True if any field was missing, unknown or migrated."""
        return bool(self.missing or self.invalid or self.migrated)


_home_override = threading.local()


def set_home_override(path: str | Path | None) -> None:
    """Redirect the home directory for the current thread (``None`` clears it)."""
    _home_override.path = Path(path) if path is not None else None


def _home_dir() -> Path | None:
    override = getattr(_home_override, "path", None)
    if override is not None:
        return override
    try:
        return Path.home()
    except RuntimeError:
        return None


def _quote(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _typed(table: dict[str, Any], key: str, kind: type, optional: bool) -> Any:
    value = table.get(key)
    if value is None:
        return None
    if not isinstance(value, kind):
        raise ConfigError(
            f"Invalid type for '{key}': expected {kind.__name__}, got {type(value).__name__}"
        )
    return value


@dataclass
class GlobalConfig:
    """Settings shared by all projects."""

    user_name: str | None = None
    use_git_user: bool = True
    editor: str | None = None
    interactive: bool = True
    id_pattern: str = DEFAULT_PATTERN
    stack_dir: str | None = None
    archive_dir: str | None = None
    template_dir: str | None = None

    @staticmethod
    def path() -> Path | None:
        """Location of the global config file, honouring the thread's home override."""
        home = _home_dir()
        return home / GLOBAL_CONFIG_FILE if home is not None else None

    @classmethod
    def from_toml(cls, text: str) -> GlobalConfig:
        """Parse TOML text; missing fields take defaults and unknown fields are ignored."""
        try:
            table = tomllib.loads(text)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid TOML: {exc}") from exc

        if "id_pattern" in table and "default_id_pattern" in table:
            raise ConfigError("duplicate field `id_pattern`")
        pattern_key = "default_id_pattern" if "default_id_pattern" in table else "id_pattern"

        config = cls(
            user_name=_typed(table, "user_name", str, True),
            editor=_typed(table, "editor", str, True),
            stack_dir=_typed(table, "stack_dir", str, True),
            archive_dir=_typed(table, "archive_dir", str, True),
            template_dir=_typed(table, "template_dir", str, True),
        )
        use_git_user = _typed(table, "use_git_user", bool, False)
        if use_git_user is not None:
            config.use_git_user = use_git_user
        interactive = _typed(table, "interactive", bool, False)
        if interactive is not None:
            config.interactive = interactive
        id_pattern = _typed(table, pattern_key, str, False)
        if id_pattern is not None:
            config.id_pattern = id_pattern
        return config

    @staticmethod
    def _require_path() -> Path:
        path = GlobalConfig.path()
        if path is None:
            raise ConfigError("Could not determine home directory")
        return path

    @classmethod
    def load(cls) -> GlobalConfig:
        """Load the global config; it must exist (created by ``qs setup``)."""
        path = cls._require_path()
        if not path.exists():
            raise ConfigError("Global config not found. Run qs setup first.")
        try:
            content = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"Failed to read global config: {path}: {exc}") from exc
        try:
            return cls.from_toml(content)
        except ConfigError as exc:
            raise ConfigError(f"Failed to parse global config: {path}: {exc}") from exc

    @classmethod
    def create_default_if_missing(cls) -> bool:
        """Write a commented default config. Returns False if one already exists."""
        path = cls._require_path()
        if path.exists():
            return False
        cls().save_with_comments(path)
        return True

    def save(self) -> None:
        """Write the current values as plain TOML (no comments)."""
        path = self._require_path()
        data = {key: value for key, value in asdict(self).items() if value is not None}
        try:
            path.write_text(tomli_w.dumps(data), encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"Failed to write global config: {path}: {exc}") from exc

    def save_with_comments(self, path: str | Path) -> None:
        """Write the config with explanatory comments for every option."""
        path = Path(path)

        def personalization(value: str | None, key: str, example: str) -> str:
            if value is None:
                return f'# {key} = "{example}"'
            return f"{key} = {_quote(value)}"

        user_name_line = personalization(self.user_name, "user_name", "Your Name")
        editor_line = personalization(self.editor, "editor", "nvim")
        use_git_user = "true" if self.use_git_user else "false"
        interactive = "true" if self.interactive else "false"

        content = f"""# queuestack Global Configuration
# This file configures queuestack behavior across all projects.
# Location: ~/.queuestack

# Your display name used as the author when creating new items.
# If not set, falls back to git user.name (if use_git_user is true).
{user_name_line}

# Whether to use `git config user.name` as a fallback when user_name is not set.
# Default: true
use_git_user = {use_git_user}

# Editor command to open when creating new items.
# Supports commands with arguments (e.g., "code --wait", "nvim").
# If not set, falls back to $VISUAL, then $EDITOR, then "vi".
{editor_line}

# Whether to enable interactive mode (opens editor, shows selection dialogs).
# Set to false for scripting or if you prefer to edit files manually.
# Default: true
interactive = {interactive}

# Pattern for generating unique item IDs.
# Default: "%y%m%d-%T%RRR" (e.g., "260109-0A2BK4M")
#
# Available tokens:
#   %y  - Year (2 digits, e.g., "26" for 2026)
#   %m  - Month (2 digits, 01-12)
#   %d  - Day of month (2 digits, 01-31)
#   %j  - Day of year (3 digits, 001-366)
#   %T  - Time as Base32 (4 chars) - seconds since midnight UTC
#   %R  - Random Base32 character (repeat for more: %RRR = 3 chars)
#   %%  - Literal percent sign
#
# Base32 uses Crockford's alphabet: 0-9, A-Z excluding I, L, O, U
# This ensures IDs are human-readable and avoid ambiguous characters.
#
# Examples:
#   "%y%m%d-%T%RRR"  -> "260109-0A2BK4M" (default, 14 chars)
#   "%y%j-%T%RR"     -> "26009-0A2BK4"   (day-of-year variant, 12 chars)
#   "%T%RRRR"        -> "0A2BK4MN"       (compact, 8 chars)
id_pattern = {_quote(self.id_pattern)}

# Default directory name for storing items (relative to project root).
# Used when initializing new projects. Can be overridden per-project.
# Default: "queuestack"
stack_dir = {_quote(self.effective_stack_dir())}

# Default subdirectory name for archived (closed) items within the queuestack directory.
# Used when initializing new projects. Can be overridden per-project.
# Default: ".archive"
archive_dir = {_quote(self.effective_archive_dir())}

# Default subdirectory name for templates within the queuestack directory.
# Used when initializing new projects. Can be overridden per-project.
# Default: ".templates"
template_dir = {_quote(self.effective_template_dir())}
"""
        try:
            path.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"Failed to write global config: {path}: {exc}") from exc

    def effective_stack_dir(self) -> str:
        """Stack directory name, or the default."""
        return self.stack_dir if self.stack_dir is not None else DEFAULT_STACK_DIR

    def effective_archive_dir(self) -> str:
        """Archive directory name, or the default."""
        return self.archive_dir if self.archive_dir is not None else DEFAULT_ARCHIVE_DIR

    def effective_template_dir(self) -> str:
        """Template directory name, or the default."""
        return self.template_dir if self.template_dir is not None else DEFAULT_TEMPLATE_DIR

    @classmethod
    def validate(cls) -> ConfigValidation:
        """Report unknown, legacy and missing required fields in the config file."""
        path = cls._require_path()
        if not path.exists():
            raise ConfigError("Global config not found")
        try:
            content = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"Failed to read global config: {path}: {exc}") from exc
        try:
            table = tomllib.loads(content)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Failed to parse global config: {path}: {exc}") from exc

        aliases = dict(LEGACY_ALIASES)
        validation = ConfigValidation()
        for key in table:
            if key in aliases:
                validation.migrated.append((key, aliases[key]))
            elif key not in VALID_FIELDS:
                validation.invalid.append(key)

        for name in REQUIRED_FIELDS:
            if name in table:
                continue
            covered = any(new == name and old in table for old, new in LEGACY_ALIASES)
            if not covered:
                validation.missing.append(name)
        return validation

    @classmethod
    def update_if_needed(cls) -> ConfigValidation:
        """Rewrite the config file in canonical form if validation finds changes."""
        validation = cls.validate()
        if not validation.has_changes():
            return validation
        path = cls._require_path()
        cls.load().save_with_comments(path)
        return validation

    def prompt_and_save_user_name(self) -> str | None:
        """Ask for the author name on a terminal and store it in the config."""
        if not sys.stdin.isatty():
            return None
        sys.stderr.write("Enter your name for item authorship: ")
        sys.stderr.flush()
        name = sys.stdin.readline().strip()
        if not name:
            return None
        self.user_name = name
        self.save()
        location = self.path()
        sys.stderr.write(
            f"\u2713 Saved user name to {location if location is not None else '~/.queuestack'}\n"
        )
        return name