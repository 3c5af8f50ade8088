"""The ``init`` command: set up a queuestack project in the working directory."""

from __future__ import annotations

from pathlib import Path

from .config import Config
from .global_config import ConfigError
from .project_config import PROJECT_CONFIG_FILE, ProjectConfig


def _create_dir(path: Path, what: str) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ConfigError(f"Failed to create {what} directory: {path}: {exc}") from exc


def execute() -> None:
    """Create the project config and the stack, archive and template directories."""
    config = Config.for_init()
    root = Path(config.project_root)

    config_path = root / PROJECT_CONFIG_FILE
    if config_path.exists():
        raise ConfigError(f"Project already initialized (found {config_path})")

    stack_dir = config.stack_dir()
    archive_dir = config.archive_dir()
    template_dir = config.template_dir()

    ProjectConfig.save_with_comments(root)

    stack_path = root / stack_dir
    _create_dir(stack_path, "queuestack")
    _create_dir(stack_path / archive_dir, "archive")
    _create_dir(stack_path / template_dir, "template")

    print("\u2713 Initialized queuestack project")
    print(f"  Config: {config_path}")
    print(f"  Items: {stack_path}")