"""Merged configuration: project settings override global ones."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .global_config import ConfigError, GlobalConfig
from .idgen import DEFAULT_PATTERN
from .project_config import ProjectConfig

DEFAULT_ID_PATTERN = DEFAULT_PATTERN


@dataclass
class Config:
    """Global and project configuration bound to a project root."""

    global_config: GlobalConfig
    project: ProjectConfig
    project_root: Path

    @classmethod
    def load(cls) -> Config:
        """Load the global config and the project found above the working directory."""
        global_config = GlobalConfig.load()
        project_root = ProjectConfig.find_project_root()
        if project_root is None:
            raise ConfigError("Not in a queuestack project (no .queuestack file found)")
        project = ProjectConfig.load(project_root)
        return cls(global_config, project, project_root)

    @classmethod
    def for_init(cls) -> Config:
        """Config rooted at the working directory, with no project settings yet."""
        global_config = GlobalConfig.load()
        try:
            project_root = Path.cwd()
        except OSError as exc:
            raise ConfigError(f"Cannot get current directory: {exc}") from exc
        return cls(global_config, ProjectConfig(), project_root)

    def id_pattern(self) -> str:
        """Effective id pattern."""
        if self.project.id_pattern is not None:
            return self.project.id_pattern
        return self.global_config.id_pattern

    def stack_dir(self) -> str:
        """Effective stack directory name."""
        if self.project.stack_dir is not None:
            return self.project.stack_dir
        return self.global_config.effective_stack_dir()

    def archive_dir(self) -> str:
        """Effective archive directory name."""
        if self.project.archive_dir is not None:
            return self.project.archive_dir
        return self.global_config.effective_archive_dir()

    def template_dir(self) -> str:
        """Effective template directory name."""
        if self.project.template_dir is not None:
            return self.project.template_dir
        return self.global_config.effective_template_dir()

    def use_git_user(self) -> bool:
        """Whether git's user.name may serve as the author name."""
        if self.project.use_git_user is not None:
            return self.project.use_git_user
        return self.global_config.use_git_user

    def interactive(self) -> bool:
        """Whether interactive mode is enabled."""
        if self.project.interactive is not None:
            return self.project.interactive
        return self.global_config.interactive

    def editor(self) -> str | None:
        """Editor command: project, global, then ``$VISUAL`` and ``$EDITOR``."""
        for candidate in (
            self.project.editor,
            self.global_config.editor,
            os.environ.get("VISUAL"),
            os.environ.get("EDITOR"),
        ):
            if candidate is not None:
                return candidate
        return None

    def stack_path(self) -> Path:
        """Directory holding open items."""
        return Path(self.project_root) / self.stack_dir()

    def archive_path(self) -> Path:
        """Directory holding closed items."""
        return self.stack_path() / self.archive_dir()

    def template_path(self) -> Path:
        """Directory holding templates."""
        return self.stack_path() / self.template_dir()

    def category_path(self, category: str) -> Path:
        """Directory of a category inside the stack."""
        return self.stack_path() / category

    def relative_path(self, path: str | Path) -> Path:
        """``path`` relative to the project root, or unchanged if outside it."""
        path = Path(path)
        try:
            return path.relative_to(self.project_root)
        except ValueError:
            return path