"""Shared constants for display, item format and file-system layout."""

# UI display
UI_TITLE_TRUNCATE_LEN = 40
UI_LABELS_TRUNCATE_LEN = 20
UI_COL_ID_WIDTH = 15
UI_COL_STATUS_WIDTH = 6

# Item format
MAX_SLUG_LENGTH = 50
FRONTMATTER_DELIMITER = "---"
ATTACHMENT_INFIX = "-Attachment-"

# File system
ITEM_FILE_EXTENSION = "md"
DEFAULT_STACK_DIR = "queuestack"
DEFAULT_ARCHIVE_DIR = ".archive"
DEFAULT_TEMPLATE_DIR = ".templates"
GLOBAL_CONFIG_FILE = ".queuestack"

# Shell completion paths (relative to the home directory)
ZSH_COMPLETIONS_DIR = ".zfunc"
ZSH_COMPLETION_FILE = "_qs"
BASH_COMPLETIONS_DIR = ".local/share/bash-completion/completions"
BASH_COMPLETION_FILE = "qs"
FISH_COMPLETIONS_DIR = ".config/fish/completions"
FISH_COMPLETION_FILE = "qs.fish"
ELVISH_COMPLETIONS_DIR = ".config/elvish/lib"
ELVISH_COMPLETION_FILE = "qs.elv"

# Shell rc files
ZSHRC_FILE = ".zshrc"
BASHRC_FILE = ".bashrc"
BASH_PROFILE_FILE = ".bash_profile"
POWERSHELL_CONFIG_DIR_UNIX = ".config/powershell"
POWERSHELL_CONFIG_DIR_WINDOWS = "Documents/PowerShell"
POWERSHELL_PROFILE_FILE = "Microsoft.PowerShell_profile.ps1"