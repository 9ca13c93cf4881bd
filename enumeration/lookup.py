# enumeration/lookup.py
"""
Name <-> value lookups over an enumeration's member table.

All functions take the enumeration class first and are pure: they read the
immutable member table and never touch the instance cache. ``Enumeration``
exposes each of them as a classmethod, so ``value_of(Animal, "Dog")`` and
``Animal.value_of("Dog")`` are the same call.

Reverse lookups (``name_of``) use strict, type-sensitive equality; see
``enumeration.table.strict_equals``.
"""
from __future__ import annotations
from typing import Any, Dict, List, Optional

from enumeration.internals import errors as er
from enumeration.table import member_table


def _member_name(enum_type: type, member: Any) -> Optional[str]:
    """Name that ``member`` refers to: a str as-is, or the name of an instance of ``enum_type``."""
    if isinstance(member, str):
        return member
    if isinstance(member, enum_type):
        return member.name
    return None


def value_of(enum_type: type, member: Any) -> Any:
    """Value of the member called ``member``.

    ``member`` may also be a member instance of ``enum_type``.

    Raises:
        UndefinedMember: No such member is declared
    """
    table = member_table(enum_type)
    info = table.get_member(_member_name(enum_type, member))
    if info is None:
        er.raise_undefined_name(member, table.enumeration)
    return info.value


def name_of(enum_type: type, value: Any) -> str:
    """Name of the first declared member whose value strictly equals ``value``.

    Raises:
        UndefinedMember: No member holds a value of the same type and value
    """
    table = member_table(enum_type)
    name = table.find_name(value)
    if name is None:
        er.raise_undefined_value(value, table.enumeration)
    return name


def is_defined(enum_type: type, member: Any) -> bool:
    """True if ``member`` names a declared member. Never raises."""
    try:
        table = member_table(enum_type)
    except TypeError:
        return False
    return _member_name(enum_type, member) in table


def all_names(enum_type: type) -> List[str]:
    """Names of all members in declaration order, as a new list on every call."""
    return list(member_table(enum_type).names())


def to_dict(enum_type: type) -> Dict[str, Any]:
    """Ordered ``{name: value}`` copy of the member table."""
    return member_table(enum_type).as_dict()


def type_name(enum_type: type) -> str:
    """Unqualified name of the enumeration (``Animal``, not ``zoo.models.Animal``)."""
    return member_table(enum_type).enumeration


# Aliases kept for readability at call sites
named = value_of
with_value = name_of
contains = is_defined
has = is_defined
defines = is_defined
all_members = all_names
