# flexport/core/domain/usergroups.py

"""Usergroup keys used to scope multi-valued properties

Callers tag values with a usergroup string where the empty string means
"no usergroup". Internally the untagged bucket is stored under
DEFAULT_USERGROUP, which can never be equal to a real usergroup name.
"""

# Standard library imports
from typing import Final

type UsergroupKey = str | None

DEFAULT_USERGROUP: Final[UsergroupKey] = None


def usergroup_key(usergroup: str | None) -> UsergroupKey:
    """Map a caller-facing usergroup to its internal bucket key"""
    return usergroup if usergroup else DEFAULT_USERGROUP


def usergroup_label(key: UsergroupKey) -> str:
    """Map an internal bucket key back to the caller-facing usergroup string"""
    return "" if key is DEFAULT_USERGROUP else key
