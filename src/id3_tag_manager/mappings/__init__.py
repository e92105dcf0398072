"""Frame directory tables."""

from .text import setup_text_mappings
from .special import setup_special_mappings


def setup_all_mappings():
    """Register every known text and special frame."""
    setup_text_mappings()
    setup_special_mappings()


__all__ = [
    'setup_text_mappings',
    'setup_special_mappings',
    'setup_all_mappings',
]
