# enumeration/base.py
from __future__ import annotations
from typing import Any, Dict, List

from enumeration import cache, lookup
from enumeration.internals import errors as er
from enumeration.meta import EnumerationMeta


class Enumeration(metaclass=EnumerationMeta):
    """Base class of all enumerations.

    Declare members as class constants holding int, float, str or bool
    values. Declaration order is the member order.

        class Animal(Enumeration):
            Horse = 0
            Dog = 1

    Instances are singletons obtained through the class, never constructed
    directly: ``Animal("Horse") is Animal("Horse")``. An instance converts to
    its member name with ``str()`` and exposes ``name`` and ``value``.
    """

    __slots__ = ("_name", "_value")

    @property
    def name(self) -> str:
        return self._name

    @property
    def value(self) -> Any:
        return self._value

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"<{type(self).__name__}.{self._name}: {self._value!r}>"

    def __setattr__(self, key: str, value: Any) -> None:
        er.raise_immutable("EN0201", enumeration=type(self).__name__)

    def __delattr__(self, key: str) -> None:
        er.raise_immutable("EN0201", enumeration=type(self).__name__)

    def __copy__(self) -> "Enumeration":
        return self

    def __deepcopy__(self, memo: Dict[int, Any]) -> "Enumeration":
        return self

    #
    # --- Lookups
    #

    @classmethod
    def value_of(cls, member: Any) -> Any:
        return lookup.value_of(cls, member)

    @classmethod
    def name_of(cls, value: Any) -> str:
        return lookup.name_of(cls, value)

    @classmethod
    def is_defined(cls, member: Any) -> bool:
        return lookup.is_defined(cls, member)

    @classmethod
    def all_names(cls) -> List[str]:
        return lookup.all_names(cls)

    @classmethod
    def to_dict(cls) -> Dict[str, Any]:
        return lookup.to_dict(cls)

    @classmethod
    def type_name(cls) -> str:
        return lookup.type_name(cls)

    #
    # --- Instances
    #

    @classmethod
    def instance_of(cls, member: Any) -> "Enumeration":
        return cache.instance_of(cls, member)

    @classmethod
    def members(cls) -> List["Enumeration"]:
        return cache.members(cls)

    # Aliases
    named = value_of
    with_value = name_of
    contains = is_defined
    has = is_defined
    defines = is_defined
    all_members = all_names
