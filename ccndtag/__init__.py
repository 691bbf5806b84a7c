"""ccndtag — the ccnb DTAG symbol table.

Maps standard ccnb element names to their compact numeric tags (DTAGs)
and back.  The shared table is built once, at import:

    >>> from ccndtag import DTAG_DICT
    >>> DTAG_DICT.name_for(14)
    'Name'
    >>> DTAG_DICT.code_for("Name")
    14
    >>> DTAG_DICT.code_for("name") is None
    True

Encoders and decoders should take the dictionary as a constructor
argument rather than importing DTAG_DICT directly, so that tests can hand
them a table made with build().
"""

from __future__ import annotations

from . import _constants
from ._constants import *  # noqa: F401,F403  (DTAG_* codes and DTAG_ENTRIES)
from ._constants import DTAG_ENTRIES, __table_version__
from ._core import TagDict, build
from ._errors import (
    ERR_BAD_CODE,
    ERR_BAD_ENTRY,
    ERR_BAD_NAME,
    ERR_DUP_CODE,
    ERR_DUP_NAME,
    DictError,
    choose_reported_error,
)

__version__ = "1.0.0"

# The one shared instance.  A malformed DTAG_ENTRIES makes this import fail.
DTAG_DICT: TagDict = build(DTAG_ENTRIES)

__all__ = [
    # Table
    "DTAG_DICT",
    "TagDict",
    "build",
    # Exception
    "DictError",
    "choose_reported_error",
    # Error codes
    "ERR_BAD_ENTRY",
    "ERR_BAD_CODE",
    "ERR_BAD_NAME",
    "ERR_DUP_CODE",
    "ERR_DUP_NAME",
] + list(_constants.__all__)
