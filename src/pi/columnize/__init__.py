"""pi-columnize: format delimited text into aligned terminal columns."""

# Configuration
from pi.columnize.config import (
    AUTO,
    UNCONSTRAINED,
    Config,
    config_from_dict,
    config_from_env,
    config_to_dict,
    default_config,
    load_config,
    merge_config,
    resolve_config,
)

# Errors
from pi.columnize.errors import (
    ColumnizeError,
    ConfigError,
    InvalidInputShapeError,
    TerminalWidthUnavailableError,
)

# Width computation
from pi.columnize.layout import Layout, compute_widths

# Rendering and entry points
from pi.columnize.render import (
    FormatResult,
    Formatter,
    columnize,
    format,
    format_rows,
    format_text,
    render_row,
    simple_format,
)

# Terminal width provider
from pi.columnize.terminal import terminal_columns

# Tokenizing
from pi.columnize.tokenize import split_lines, tokenize

# Width measurement
from pi.columnize.width import char_width, visible_width

# Wrapping
from pi.columnize.wrap import split_cell, wrap_row

__all__ = [
    # Configuration
    "AUTO",
    "UNCONSTRAINED",
    "Config",
    "config_from_dict",
    "config_from_env",
    "config_to_dict",
    "default_config",
    "load_config",
    "merge_config",
    "resolve_config",
    # Errors
    "ColumnizeError",
    "ConfigError",
    "InvalidInputShapeError",
    "TerminalWidthUnavailableError",
    # Width computation
    "Layout",
    "compute_widths",
    # Rendering
    "FormatResult",
    "Formatter",
    "columnize",
    "format",
    "format_rows",
    "format_text",
    "render_row",
    "simple_format",
    # Terminal
    "terminal_columns",
    # Tokenizing
    "split_lines",
    "tokenize",
    # Utilities
    "char_width",
    "split_cell",
    "visible_width",
    "wrap_row",
]
