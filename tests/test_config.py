from pathlib import Path

import pytest

from queuestack.config import Config
from queuestack.constants import DEFAULT_ARCHIVE_DIR, DEFAULT_STACK_DIR, DEFAULT_TEMPLATE_DIR
from queuestack.global_config import ConfigError, GlobalConfig, set_home_override
from queuestack.idgen import DEFAULT_PATTERN
from queuestack.project_config import ProjectConfig


@pytest.fixture
def home(tmp_path):
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    set_home_override(home_dir)
    yield home_dir
    set_home_override(None)


def make(project=None, global_config=None, root=Path("/work/proj")):
    return Config(global_config or GlobalConfig(), project or ProjectConfig(), root)


def test_defaults_come_from_global():
    config = make()
    assert config.id_pattern() == DEFAULT_PATTERN
    assert config.stack_dir() == DEFAULT_STACK_DIR
    assert config.archive_dir() == DEFAULT_ARCHIVE_DIR
    assert config.template_dir() == DEFAULT_TEMPLATE_DIR
    assert config.use_git_user() is True
    assert config.interactive() is True


def test_project_overrides_global():
    global_config = GlobalConfig(stack_dir="tasks", interactive=True, id_pattern="%R")
    project = ProjectConfig(stack_dir="issues", interactive=False, id_pattern="%y%j-%RRR",
                            use_git_user=False, archive_dir="done", template_dir="tpl")
    config = make(project, global_config)
    assert config.stack_dir() == "issues"
    assert config.interactive() is False
    assert config.id_pattern() == "%y%j-%RRR"
    assert config.use_git_user() is False
    assert config.archive_dir() == "done"
    assert config.template_dir() == "tpl"


def test_global_value_used_when_project_unset():
    config = make(global_config=GlobalConfig(stack_dir="tasks", interactive=False))
    assert config.stack_dir() == "tasks"
    assert config.interactive() is False


def test_paths():
    root = Path("/work/proj")
    config = make(project=ProjectConfig(stack_dir="issues"), root=root)
    assert config.stack_path() == root / "issues"
    assert config.archive_path() == root / "issues" / DEFAULT_ARCHIVE_DIR
    assert config.template_path() == root / "issues" / DEFAULT_TEMPLATE_DIR
    assert config.category_path("bugs") == root / "issues" / "bugs"


def test_relative_path_inside_and_outside():
    root = Path("/work/proj")
    config = make(root=root)
    inside = root / "queuestack" / "item.md"
    assert config.relative_path(inside) == Path("queuestack") / "item.md"
    outside = Path("/elsewhere/item.md")
    assert config.relative_path(outside) == outside


def test_editor_precedence(monkeypatch):
    monkeypatch.setenv("VISUAL", "visual-ed")
    monkeypatch.setenv("EDITOR", "plain-ed")
    assert make(ProjectConfig(editor="proj-ed"), GlobalConfig(editor="glob-ed")).editor() == "proj-ed"
    assert make(global_config=GlobalConfig(editor="glob-ed")).editor() == "glob-ed"
    assert make().editor() == "visual-ed"
    monkeypatch.delenv("VISUAL")
    assert make().editor() == "plain-ed"
    monkeypatch.delenv("EDITOR")
    assert make().editor() is None


def test_load_reads_global_and_project(home, tmp_path, monkeypatch):
    GlobalConfig(stack_dir="tasks").save_with_comments(GlobalConfig.path())
    project_root = tmp_path / "project"
    nested = project_root / "deep"
    nested.mkdir(parents=True)
    ProjectConfig(archive_dir="done").save(project_root)
    monkeypatch.chdir(nested)
    config = Config.load()
    assert config.project_root == project_root
    assert config.stack_dir() == "tasks"
    assert config.archive_dir() == "done"


def test_load_without_global_config_raises(home, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(ConfigError):
        Config.load()


def test_for_init_uses_working_directory(home, tmp_path, monkeypatch):
    GlobalConfig.create_default_if_missing()
    workdir = tmp_path / "fresh"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    config = Config.for_init()
    assert config.project_root == workdir
    assert config.project == ProjectConfig()
    assert config.stack_path() == workdir / DEFAULT_STACK_DIR