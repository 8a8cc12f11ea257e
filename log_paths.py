"""
Title: Relative Log Path Validation
Date Created: 2026-10-12
Last Modified: 2026-10-14
Version: 1.1

Purpose:
Checks that candidate log path strings are well-formed relative paths before
the LogWriter performs any I/O. The accepted grammar is the RFC 3986
"path-noscheme" production, applied literally:

    relative-path = segment-nz-nc *( "/" segment )
    segment       = *pchar
    segment-nz-nc = 1*( unreserved / pct-encoded / sub-delims / "@" )
    pchar         = unreserved / pct-encoded / sub-delims / ":" / "@"

Scope and Limitations:
- Syntax check only; existence, permissions and platform file name rules
  are left to the write itself.
- Dot segments are accepted, so "../escape" is valid and may address a file
  outside the working directory.
- Percent escapes are validated but not decoded.
- Empty strings, leading "/", schemes or drive letters, backslashes,
  whitespace, "?" and "#" are rejected.

Dependencies:
- Python 3.10+
- re (standard library)
"""

import re

_UNRESERVED = r"A-Za-z0-9\-._~"
_SUB_DELIMS = r"!$&'()*+,;="
_PCT_ENCODED = r"%[0-9A-Fa-f]{2}"

_PCHAR = rf"(?:[{_UNRESERVED}{_SUB_DELIMS}:@]|{_PCT_ENCODED})"
_SEGMENT_NZ_NC = rf"(?:[{_UNRESERVED}{_SUB_DELIMS}@]|{_PCT_ENCODED})+"

RELATIVE_PATH_RE = re.compile(rf"{_SEGMENT_NZ_NC}(?:/{_PCHAR}*)*")


def _is_well_formed(path: object) -> bool:
    return isinstance(path, str) and RELATIVE_PATH_RE.fullmatch(path) is not None


def is_valid_relative_path(*paths: str | None) -> bool:
    # True only when at least one path is given and every path is well-formed.
    if not paths:
        return False
    return all(_is_well_formed(p) for p in paths)
