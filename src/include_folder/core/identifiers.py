from __future__ import annotations

"""
Identifier Derivation.

Turns raw filesystem names into identifiers of the target declaration
language. All sanitization and validation lives here so it can be tested
independently of the traversal.
"""

import os
import re
from typing import Iterable, Optional

from include_folder.domain.errors import InvalidIdentifier

_INVALID_CHARS_RX = re.compile(r"\W", re.UNICODE)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def sanitize(
        name: str,
        reserved: Iterable[str] = (),
        *,
        path: Optional[str] = None,
) -> str:
    """
    Derive a valid identifier from a filesystem name or file stem.

    Every character that is not a letter, digit or underscore is replaced
    with an underscore, and a leading digit is prefixed with one.

    Args:
        name: Directory name or file stem.
        reserved: Words the target language reserves.
        path: Full path of the entry, used in diagnostics.

    Returns:
        str: The derived identifier.

    Raises:
        InvalidIdentifier: If the result is empty or a reserved word.
    """
    candidate = _INVALID_CHARS_RX.sub("_", name or "")
    if not candidate:
        raise InvalidIdentifier(name, path, "name is empty")

    if candidate[0].isdigit():
        candidate = "_" + candidate

    if candidate in frozenset(reserved):
        raise InvalidIdentifier(name, path, f"'{candidate}' is a reserved word")

    return candidate


def module_identifier(path: str, reserved: Iterable[str] = ()) -> str:
    """
    Derive the top-level identifier from the final segment of a path.

    Trailing separators are ignored, so 'src/my.thing/' yields 'my_thing'.
    """
    segment = os.path.basename(os.path.normpath(path))
    if segment in ("", ".", ".."):
        raise InvalidIdentifier(path, path, "path has no usable final segment")
    return sanitize(segment, reserved, path=path)
