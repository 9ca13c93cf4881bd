# enumeration/table.py
"""
Member tables: the ordered name -> value pairs declared on an enumeration.

A table is built exactly once per enumeration class, when the class body has
finished executing (see ``EnumerationMeta``), and is never modified afterwards.
Every lookup, the instance cache and the class-level conveniences read from it.

Membership rules for a class-body attribute:
- names starting with an underscore are class machinery, not members
- functions, descriptors (property, classmethod, staticmethod, ...) and nested
  classes are not members
- everything else is a member and must hold an int, float, str or bool

Members inherited from enumeration base classes come first, in the order their
base declared them, followed by the class's own members.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from collections.abc import Mapping
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from enumeration.internals import errors as er

logger = logging.getLogger(__name__)

# Types a member value may have (subclasses included)
SCALAR_TYPES: Tuple[type, ...] = (int, float, str, bool)


def strict_equals(left: Any, right: Any) -> bool:
    """Type-sensitive equality: both the exact type and the value must match.

    ``0``, ``0.0``, ``False`` and ``"0"`` are all different under this rule.
    """
    return type(left) is type(right) and left == right


def is_member_candidate(name: str, value: Any) -> bool:
    """True if a class-body attribute declares an enumeration member."""
    if not isinstance(name, str) or name.startswith("_"):
        return False
    if isinstance(value, type):
        return False
    if callable(value) or hasattr(type(value), "__get__"):
        return False
    return True


@dataclass(frozen=True)
class MemberInfo:
    """One declared member."""
    name: str       # Member name (e.g., "Horse")
    value: Any      # Scalar value (e.g., 0)
    owner: str      # Enumeration that declared it (differs from the table's for inherited members)


@dataclass(frozen=True)
class MemberTable(Mapping):
    """Immutable, ordered member table of one enumeration type.

    Behaves as a read-only mapping from member name to value. Name lookups
    are O(1); reverse lookups scan in declaration order so the first
    declared member wins when values repeat.
    """
    enumeration: str                        # Unqualified enumeration name (e.g., "Animal")
    members: Tuple[MemberInfo, ...] = ()    # Declaration order
    _index: Dict[str, MemberInfo] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_index", {m.name: m for m in self.members})

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self) -> Iterator[str]:
        return (m.name for m in self.members)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self._index

    def __getitem__(self, name: str) -> Any:
        if not isinstance(name, str):
            raise KeyError(name)
        return self._index[name].value

    def get_member(self, name: str) -> Optional[MemberInfo]:
        """Get member info by name, or None if no such member is declared."""
        if not isinstance(name, str):
            return None
        return self._index.get(name)

    def names(self) -> Tuple[str, ...]:
        return tuple(m.name for m in self.members)

    def as_dict(self) -> Dict[str, Any]:
        """A fresh ordered dict copy of the table."""
        return {m.name: m.value for m in self.members}

    def find_name(self, value: Any) -> Optional[str]:
        """First member name, in declaration order, whose value strictly equals ``value``."""
        for member in self.members:
            if strict_equals(member.value, value):
                return member.name
        return None


def collect_members(
    enumeration: str,
    namespace: Mapping[str, Any],
    inherited: Iterable[MemberTable] = (),
    reserved: Iterable[str] = (),
    unique: bool = False,
) -> MemberTable:
    """Build the member table for a class body.

    Args:
        enumeration: Name of the class being defined
        namespace: The class body namespace, in declaration order
        inherited: Tables of the enumeration base classes, in MRO order
        reserved: Attribute names of the Enumeration API that members may not shadow
        unique: Reject members whose values strictly equal an earlier member's

    Returns:
        The new MemberTable

    Raises:
        InvalidDeclaration: A member breaks one of the declaration rules
    """
    members: List[MemberInfo] = []
    seen: Dict[str, MemberInfo] = {}

    for table in inherited:
        for member in table.members:
            if member.name not in seen:
                members.append(member)
                seen[member.name] = member

    reserved_names = frozenset(reserved)
    for name, value in namespace.items():
        if not is_member_candidate(name, value):
            continue

        if not name.isidentifier():
            er.raise_invalid_declaration("EN0101", enumeration, name=name)

        if name in reserved_names:
            er.raise_invalid_declaration("EN0104", enumeration, name=name)

        if name in seen:
            er.raise_invalid_declaration("EN0103", enumeration, name=name, base=seen[name].owner)

        if not isinstance(value, SCALAR_TYPES):
            er.raise_invalid_declaration("EN0102", enumeration, name=name, kind=type(value).__name__)

        for earlier in members:
            if strict_equals(earlier.value, value):
                if unique:
                    er.raise_invalid_declaration("EN0106", enumeration,
                                                 first=earlier.name, name=name, value=value)
                if logger.isEnabledFor(logging.DEBUG):
                    logger.debug("%s", er.format_message("EN0107", enumeration=enumeration,
                                                         first=earlier.name, name=name, value=value))
                break

        member = MemberInfo(name=name, value=value, owner=enumeration)
        members.append(member)
        seen[name] = member

    table = MemberTable(enumeration=enumeration, members=tuple(members))
    logger.debug("built member table for %s with %d member(s)", enumeration, len(table))
    return table


def member_table(enum_type: type) -> MemberTable:
    """Return the member table owned by an enumeration class.

    Repeated calls return the same table object.

    Raises:
        TypeError: ``enum_type`` is not an enumeration class
    """
    table = getattr(enum_type, "__member_table__", None) if isinstance(enum_type, type) else None
    if not isinstance(table, MemberTable):
        raise TypeError(f"{enum_type!r} is not an enumeration type")
    return table
