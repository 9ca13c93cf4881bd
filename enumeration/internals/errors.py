# enumeration/internals/errors.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


class Category(str, Enum):
    GENERAL     = "general"
    LOOKUP      = "lookup"
    DECLARATION = "declaration"
    MUTATION    = "mutation"


@dataclass(frozen=True)
class ErrorMessage:
    code: str
    severity: Severity
    text: str
    category: Category = Category.GENERAL
    doc: str = ""


REGISTRY: Dict[str, ErrorMessage] = {}

class _ErrorCatalog:
    def __init__(self, backing: Dict[str, ErrorMessage]) -> None:
        self._registry = backing

    def __getattr__(self, name: str) -> ErrorMessage:
        try:
            return self._registry[name]
        except KeyError as e:
            raise AttributeError(name) from e

    def __getitem__(self, code: str) -> ErrorMessage:
        return self._registry[code]


ERR = _ErrorCatalog(REGISTRY)


class EnumerationError(Exception):
    """Base class for every error raised by this package.

    The message is rendered from the catalog entry for ``code``, so the
    text a caller sees always starts with the code (e.g. ``EN0001: ...``).
    """

    def __init__(self, code: str, **kwargs: Any) -> None:
        self.code = code
        super().__init__(f"{code}: {format_message(code, **kwargs)}")


class UndefinedMember(EnumerationError, LookupError):
    """A name or value that no member of the enumeration holds.

    Attributes:
        member: The offending name (or value, for reverse lookups)
        enumeration: Unqualified name of the enumeration type
    """

    def __init__(self, code: str, member: Any, enumeration: str) -> None:
        self.member = member
        self.enumeration = enumeration
        super().__init__(code, member=member, kind=type(member).__name__,
                         enumeration=enumeration)


class InvalidDeclaration(EnumerationError, TypeError):
    """An enumeration class body that breaks the declaration rules."""

    def __init__(self, code: str, enumeration: str, **kwargs: Any) -> None:
        self.enumeration = enumeration
        super().__init__(code, enumeration=enumeration, **kwargs)


def raise_undefined_name(member: Any, enumeration: str) -> None:
    raise UndefinedMember("EN0001", member, enumeration)

def raise_undefined_value(value: Any, enumeration: str) -> None:
    raise UndefinedMember("EN0002", value, enumeration)

def raise_invalid_declaration(code: str, enumeration: str, **kwargs: Any) -> None:
    raise InvalidDeclaration(code, enumeration, **kwargs)

def raise_immutable(code: str, **kwargs: Any) -> None:
    """Raise an AttributeError for a write to something the enumeration owns."""
    raise AttributeError(f"{code}: {_fmt(code, **kwargs)}")

def format_message(code: str, **kwargs: Any) -> str:
    """Render the catalog text for ``code`` with ``kwargs``.

    Raises:
        KeyError: Unknown code, or a placeholder missing from ``kwargs``
    """
    return _fmt(code, **kwargs)


#
# --- Helpers
#

def _add(msg: ErrorMessage) -> None:
    if msg.code in REGISTRY:
        raise ValueError(f"duplicate error code {REGISTRY[msg.code]} in {msg}")
    REGISTRY[msg.code] = msg

def _get(code: str) -> ErrorMessage:
    try:
        return REGISTRY[code]
    except KeyError:
        raise KeyError(f"unknown error code: {code}")

def _fmt(code: str, **kwargs) -> str:
    msg = _get(code)
    try:
        return msg.text.format(**kwargs)
    except KeyError as key_error:
        missing = key_error.args[0]
        raise KeyError(f"missing text key '{missing}' for {code} "
                       f"(needed by: {msg.text!r})") from None

#
# --- Registry population
#

# Lookups (EN00xx)
_add(ErrorMessage("EN0001", Severity.ERROR,
    "undefined member '{member}' in enumeration '{enumeration}'",
    Category.LOOKUP, "No member with this name is declared on the enumeration."))

_add(ErrorMessage("EN0002", Severity.ERROR,
    "no member of enumeration '{enumeration}' holds value {member!r} ({kind})",
    Category.LOOKUP, "Reverse lookups compare type and value; 0, '0', 0.0 and False are all different."))

# Declarations (EN01xx)
_add(ErrorMessage("EN0101", Severity.ERROR,
    "invalid member name {name!r} in enumeration '{enumeration}'",
    Category.DECLARATION, "Member names must be non-empty identifiers."))

_add(ErrorMessage("EN0102", Severity.ERROR,
    "member '{name}' of enumeration '{enumeration}' has non-scalar value of type '{kind}'",
    Category.DECLARATION, "Member values must be int, float, str or bool."))

_add(ErrorMessage("EN0103", Severity.ERROR,
    "member '{name}' of enumeration '{enumeration}' is already declared by '{base}'",
    Category.DECLARATION, "A subclass cannot redeclare a member it inherits."))

_add(ErrorMessage("EN0104", Severity.ERROR,
    "member name '{name}' in enumeration '{enumeration}' shadows an Enumeration attribute",
    Category.DECLARATION, "Names such as 'value' or 'name_of' are reserved by the Enumeration API."))

_add(ErrorMessage("EN0105", Severity.ERROR,
    "cannot {action} member '{name}' of enumeration '{enumeration}'",
    Category.MUTATION, "Members are fixed once the class body has run."))

_add(ErrorMessage("EN0106", Severity.ERROR,
    "members '{first}' and '{name}' of unique enumeration '{enumeration}' share value {value!r}",
    Category.DECLARATION, "Enumerations declared with unique=True reject duplicate values."))

_add(ErrorMessage("EN0107", Severity.WARNING,
    "members '{first}' and '{name}' of enumeration '{enumeration}' share value {value!r}; reverse lookups return '{first}'",
    Category.DECLARATION, "Duplicate values are allowed; name_of resolves to the first declared member."))

_add(ErrorMessage("EN0201", Severity.ERROR,
    "member instances of enumeration '{enumeration}' are immutable",
    Category.MUTATION, "An instance's name and value are fixed when the cache creates it."))
