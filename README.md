# queuestack

The groundwork for a scriptable task and issue tracker whose items live as
Markdown files inside a project directory: configuration handling, item ID
generation, project initialisation and editor launching.

## Installation

```
pip install .
pip install ".[test]"   # with pytest, to run the test suite
```

## Configuration

Settings come from two TOML files, both named `.queuestack`:

- the global file in your home directory, shared by all projects
  (`queuestack.global_config.GlobalConfig`);
- the project file at the root of a project, whose settings override the
  global ones (`queuestack.project_config.ProjectConfig`).

Supported keys: `user_name`, `use_git_user`, `editor`, `interactive`,
`id_pattern`, `stack_dir`, `archive_dir` and `template_dir`. The old key
`default_id_pattern` is still read as `id_pattern`.

`GlobalConfig.load()` raises `ConfigError` when the global file does not
exist, so create it first:

```python
from queuestack.global_config import GlobalConfig

GlobalConfig.create_default_if_missing()   # writes a commented default file
report = GlobalConfig.update_if_needed()   # adds missing keys, drops unknown ones
if report.has_changes():
    print(report.missing, report.invalid, report.migrated)
```

`GlobalConfig.from_toml(text)` and `ProjectConfig.from_toml(text)` parse
configuration text directly; a wrong value type raises `ConfigError`.
`set_home_override(path)` points the global config at another directory for
the current thread, which is handy in tests.

The merged view, with project settings taking precedence:

```python
from queuestack.config import Config

config = Config.load()          # searches upward from the working directory
print(config.stack_path())      # <project>/queuestack
print(config.archive_path())    # <project>/queuestack/.archive
print(config.template_path())   # <project>/queuestack/.templates
print(config.id_pattern())      # "%y%m%d-%T%RRR" unless overridden
```

## Starting a project

`queuestack.init_command.execute()` writes a project `.queuestack` file, with
every option documented and commented out, in the current directory, and
creates the item, archive and template directories. It raises `ConfigError`
if the project is already initialised.

## Item IDs

IDs are built from a pattern of tokens:

| Token | Meaning                                          |
|-------|--------------------------------------------------|
| `%y`  | two-digit year                                   |
| `%m`  | two-digit month                                  |
| `%d`  | two-digit day of month                           |
| `%j`  | three-digit day of year                          |
| `%T`  | seconds since midnight UTC, 4 Base32 characters  |
| `%R`  | one random Base32 character per `R`              |
| `%%`  | a literal percent sign                           |

Unknown tokens are kept as written. Base32 uses Crockford's alphabet (digits
and letters without I, L, O, U); see `queuestack.base32.encode` and
`encode_bytes`.

```python
from datetime import datetime, timezone
from queuestack.idgen import generate, extract_from_filename

item_id = generate("%y%m%d-%T%RRR")     # e.g. "260109-0A2BK4M"
generate("%y%m%d", datetime(2026, 1, 9, tzinfo=timezone.utc))   # "260109"
extract_from_filename("260109-02F7K9M-some-title.md")   # "260109-02F7K9M"
```

## Editor

`queuestack.editor.open_in_editor(path, config)` opens a file in the editor
named by the `editor` setting, then `$VISUAL`, then `$EDITOR`, falling back to
`vi`. Nothing is launched when output is not a terminal. An invalid command,
a failure to start it or a non-zero exit raises `EditorError`.

## What is not included

This package has no command-line program, and it does not create, read,
list, search, update, close or archive items, nor manage attachments or
templates. It provides the configuration, ID and project-layout pieces only.