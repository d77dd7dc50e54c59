"""Utility functions for indexdate.

Import convention: use module-level imports for clarity.

    from indexdate.utils import isodatetime, patterns
    iso = isodatetime.to_iso(1704412800, tz=UTC)
    fmt = patterns.to_strftime("d.m.Y")
"""

from . import isodatetime, patterns

__all__ = ["isodatetime", "patterns"]
