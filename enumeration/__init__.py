"""Enumeration - closed name/value enumerations with singleton member instances."""
from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("enumeration")
    __dev__ = False
except PackageNotFoundError:
    # Development mode - read from pyproject.toml
    import tomllib
    from pathlib import Path
    try:
        pyproject = Path(__file__).parent.parent / "pyproject.toml"
        with open(pyproject, "rb") as f:
            __version__ = tomllib.load(f).get("project", {}).get("version", "unknown")
    except (OSError, tomllib.TOMLDecodeError):
        __version__ = "unknown"
    __dev__ = True

from enumeration.base import Enumeration
from enumeration.cache import InstanceCache, instance_of, members
from enumeration.internals.errors import EnumerationError, InvalidDeclaration, UndefinedMember
from enumeration.lookup import (
    all_members, all_names, contains, defines, has, is_defined, name_of, named,
    to_dict, type_name, value_of, with_value,
)
from enumeration.meta import EnumerationMeta
from enumeration.table import MemberInfo, MemberTable, member_table, strict_equals

__all__ = [
    "Enumeration", "EnumerationMeta",
    "EnumerationError", "UndefinedMember", "InvalidDeclaration",
    "InstanceCache", "MemberInfo", "MemberTable",
    "value_of", "name_of", "is_defined", "all_names", "to_dict", "type_name",
    "instance_of", "members", "member_table", "strict_equals",
    "named", "with_value", "contains", "has", "defines", "all_members",
]
