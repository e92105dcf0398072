"""Tag container returned by the reader and accepted by the writer."""

from typing import Any, Dict, Optional


class Tag(dict):
    """
    Canonical fields (``title``, ``comment``, ``user_defined_text``...) are
    the dict items. ``raw`` maps the literal frame identifier of every frame
    that was read (``TIT2``, ``TT2``, ``COMM``...) to the same decoded value,
    including frames that have no canonical name.

    Repeatable frames (user defined text, private, chapter) are lists in both
    views.
    """

    def __init__(self, fields: Optional[Dict[str, Any]] = None, raw: Optional[Dict[str, Any]] = None):
        super().__init__(fields or {})
        self.raw: Dict[str, Any] = dict(raw or {})

    def __repr__(self):
        return f"Tag({dict.__repr__(self)}, raw={self.raw!r})"
