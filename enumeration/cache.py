# enumeration/cache.py
"""Singleton member instances.

Each enumeration class owns one ``InstanceCache`` (attached by
``EnumerationMeta`` when the class is defined). The cache is the only code
that creates member instances: it makes one instance per member name on first
request and hands back that same object for the rest of the process.

Population is monotonic: empty -> partially populated -> fully populated.
Nothing is ever evicted or replaced.
"""
from __future__ import annotations
import logging
import threading
from typing import Any, Dict, List, Tuple

from enumeration import lookup
from enumeration.internals import errors as er

logger = logging.getLogger(__name__)


class InstanceCache:
    """Per-enumeration memoizing factory for member instances.

    The check-then-create step runs under a lock, so threads racing on the
    first access to the same member still end up with a single instance.
    Hits on already-created members do not take the lock.
    """

    def __init__(self, enum_type: type) -> None:
        self.enum_type = enum_type
        self._instances: Dict[str, Any] = {}
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def get(self, name: str) -> Any:
        """Return the instance for member ``name``, creating it on first use.

        Raises:
            UndefinedMember: ``name`` is not a declared member
        """
        instance = self._instances.get(name) if isinstance(name, str) else None
        if instance is not None:
            return instance

        if not lookup.is_defined(self.enum_type, name):
            er.raise_undefined_name(name, lookup.type_name(self.enum_type))

        with self._lock:
            instance = self._instances.get(name)
            if instance is None:
                instance = self._create(name)
                self._instances[name] = instance
        return instance

    def cached_names(self) -> Tuple[str, ...]:
        """Names with an instance already created, in creation order."""
        return tuple(self._instances)

    def __contains__(self, name: object) -> bool:
        return name in self._instances

    def __len__(self) -> int:
        return len(self._instances)

    def __repr__(self) -> str:
        return f"<InstanceCache {self.enum_type.__name__}: {len(self)} cached>"

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _create(self, name: str) -> Any:
        # The value is read exactly once; the instance keeps it for good.
        value = lookup.value_of(self.enum_type, name)
        instance = object.__new__(self.enum_type)
        object.__setattr__(instance, "_name", name)
        object.__setattr__(instance, "_value", value)
        logger.debug("created member instance %s.%s", self.enum_type.__name__, name)
        return instance


def instance_cache(enum_type: type) -> InstanceCache:
    """Return the cache owned by an enumeration class.

    Raises:
        TypeError: ``enum_type`` is not an enumeration class
    """
    cache = enum_type.__dict__.get("__instance_cache__") if isinstance(enum_type, type) else None
    if not isinstance(cache, InstanceCache):
        raise TypeError(f"{enum_type!r} is not an enumeration type")
    return cache


def instance_of(enum_type: type, member: Any) -> Any:
    """The singleton instance of ``enum_type`` for ``member``.

    ``member`` is a member name, or an existing instance of ``enum_type`` (which
    is returned as-is).

    Raises:
        UndefinedMember: ``member`` does not name a declared member
    """
    cache = instance_cache(enum_type)
    if isinstance(member, enum_type):
        return cache.get(member.name)
    return cache.get(member)


def members(enum_type: type) -> List[Any]:
    """All member instances of ``enum_type`` in declaration order."""
    cache = instance_cache(enum_type)
    return [cache.get(name) for name in lookup.all_names(enum_type)]
