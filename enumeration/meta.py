# enumeration/meta.py
"""
EnumerationMeta: turns a class body of constants into an enumeration type.

When a class using this metaclass is created, the metaclass
1. collects the member table from the class body (enumeration.table),
2. attaches a fresh InstanceCache owned by the new class (enumeration.cache),
3. routes calls on the class to that cache: ``Animal("Horse")`` returns the
   singleton instance for ``Horse`` instead of constructing a new object.

Class keywords:
    unique: Reject members that share a value (default: inherited, else False)

Example:
    class Animal(Enumeration):
        Horse = 0
        Dog = 1

    Animal.Horse            # 0, the raw constant
    Animal("Horse")         # <Animal.Horse: 0>, always the same object
    "Dog" in Animal         # True
    list(Animal)            # [<Animal.Horse: 0>, <Animal.Dog: 1>]
"""
from __future__ import annotations
from typing import Any, Dict, Iterator, List, Optional, Set, Tuple

from enumeration import cache, lookup
from enumeration.internals import errors as er
from enumeration.table import MemberTable, collect_members, member_table


def _enumeration_bases(bases: Tuple[type, ...]) -> List[type]:
    """Enumeration classes among ``bases`` and their ancestors, in MRO order, without repeats."""
    found: List[type] = []
    for base in bases:
        for klass in base.__mro__:
            if isinstance(klass, EnumerationMeta) and klass not in found:
                found.append(klass)
    return found


def _reserved_names(enum_bases: List[type]) -> Set[str]:
    """Public attribute names of the enumeration bases that are not members themselves."""
    reserved: Set[str] = set()
    for klass in enum_bases:
        table = klass.__dict__["__member_table__"]
        reserved.update(name for name in klass.__dict__
                        if not name.startswith("_") and name not in table)
    return reserved


class EnumerationMeta(type):
    """Metaclass of every enumeration type."""

    def __new__(mcs, name: str, bases: Tuple[type, ...], namespace: Dict[str, Any],
                unique: Optional[bool] = None, **kwargs: Any) -> "EnumerationMeta":
        enum_bases = _enumeration_bases(bases)
        if unique is None:
            unique = bool(enum_bases and enum_bases[0].__dict__.get("__unique__", False))

        # Direct enumeration bases only: their tables already include anything they inherit
        inherited = [b.__dict__["__member_table__"] for b in bases if isinstance(b, EnumerationMeta)]
        table = collect_members(
            name,
            namespace,
            inherited=inherited,
            reserved=_reserved_names(enum_bases),
            unique=unique,
        )

        cls = super().__new__(mcs, name, bases, namespace, **kwargs)
        type.__setattr__(cls, "__member_table__", table)
        type.__setattr__(cls, "__unique__", unique)
        type.__setattr__(cls, "__instance_cache__", cache.InstanceCache(cls))
        return cls

    def __init__(cls, name: str, bases: Tuple[type, ...], namespace: Dict[str, Any],
                 unique: Optional[bool] = None, **kwargs: Any) -> None:
        super().__init__(name, bases, namespace, **kwargs)

    # ------------------------------------------------------------------
    # Member access
    # ------------------------------------------------------------------

    def __call__(cls, *args: Any, **kwargs: Any) -> Any:
        """``Animal("Horse")``: the cached instance for a member name."""
        if kwargs or len(args) != 1:
            raise TypeError(f"{cls.__name__}() takes exactly one member name "
                            f"({len(args) + len(kwargs)} given)")
        return cache.instance_of(cls, args[0])

    def __getitem__(cls, name: str) -> Any:
        return cache.instance_of(cls, name)

    def __contains__(cls, member: object) -> bool:
        return lookup.is_defined(cls, member)

    def __iter__(cls) -> Iterator[Any]:
        return iter(cache.members(cls))

    def __len__(cls) -> int:
        return len(member_table(cls))

    def __bool__(cls) -> bool:
        # Classes are truthy even with zero members
        return True

    def __repr__(cls) -> str:
        return f"<enumeration '{cls.__name__}'>"

    # ------------------------------------------------------------------
    # Immutability
    # ------------------------------------------------------------------

    def __setattr__(cls, name: str, value: Any) -> None:
        if name in cls.__dict__.get("__member_table__", ()):
            er.raise_immutable("EN0105", action="reassign", name=name, enumeration=cls.__name__)
        super().__setattr__(name, value)

    def __delattr__(cls, name: str) -> None:
        if name in cls.__dict__.get("__member_table__", ()):
            er.raise_immutable("EN0105", action="delete", name=name, enumeration=cls.__name__)
        super().__delattr__(name)
