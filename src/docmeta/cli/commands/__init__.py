"""Command implementations for docmeta CLI."""

from .date import add_date_arguments, handle_date
from .show import add_show_arguments, handle_show

__all__ = [
    "add_date_arguments",
    "handle_date",
    "add_show_arguments",
    "handle_show",
]
