"""Configuration constants.

Values here are format and protocol constraints, not user settings.
For configurable values, see models.py.
"""

# =============================================================================
# Tag line format
# =============================================================================
# The layout is read by vim's tag search (`:help tags-file-format`) and by
# other ctags consumers, so none of this is configurable.

FIELD_SEPARATOR = "\t"
"""Separator between the name, file and address fields."""

ADDRESS_TERMINATOR = ';"'
"""Ends the Ex address; extension fields follow it."""

FILE_SCOPE_FIELD = "file"
"""Extension field marking a tag valid only inside its own file."""

LANGUAGE_FIELD = "language"
"""Extension field naming the source language."""

# =============================================================================
# Defaults
# =============================================================================

DEFAULT_OUTPUT = "tags"
"""Default tag file name."""

DEFAULT_LANGUAGE = "scala"
"""Default value for the language: extension field."""

SOURCE_EXTENSIONS: tuple[str, ...] = ("scala", "sc")
"""Extensions collected when a directory is passed on the command line."""

PROJECT_CONFIG_NAME = ".sctags.yaml"
"""Per-project config file, looked up in the working directory."""
