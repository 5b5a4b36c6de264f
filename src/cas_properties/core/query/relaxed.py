from __future__ import annotations

from typing import Callable, Dict, List, Tuple
import re

from cas_properties.core.enums import Manipulation, Variation


_CAMEL_CASE_RE = re.compile(r"([^A-Z-])([A-Z])")
_SEPARATOR_RE = re.compile(r"[_\-.]")
_SEPARATORS = ("_", "-", ".")
_KEY_SEGMENT_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_\-]*(\[[^\[\]]+\])*")


def is_valid_property_key(key: str) -> bool:
    """Whether `key` is a non-empty dotted key made of identifier segments.

    Segments may carry index suffixes such as ``ldap[0]``.
    """
    if not key:
        return False
    return all(_KEY_SEGMENT_RE.fullmatch(segment) for segment in key.split("."))


def to_hyphenated(name: str) -> str:
    """Convert camel-case segments to lower-case hyphenated words.

    An upper-case letter becomes ``-`` plus its lower-case form unless it
    starts the name or already follows a hyphen.

    Examples:
        >>> to_hyphenated("cas.authn.acceptUsers")
        'cas.authn.accept-users'
    """
    result = ""
    for ch in name:
        if ch.isupper() and result and result[-1] != "-":
            result += "-" + ch.lower()
        else:
            result += ch
    return result


def environment_variable_name(name: str) -> str:
    """Upper-case underscore spelling of a dotted key.

    Examples:
        >>> environment_variable_name("cas.authn.ldap[0].baseDn")
        'CAS_AUTHN_LDAP_0_BASE_DN'
    """
    value = to_hyphenated(name)
    value = value.replace("[", "_").replace("]", "")
    return re.sub(r"[.\-]", "_", value).upper()


def _capitalize(field: str) -> str:
    # Only the first character changes; str.capitalize() would lower the rest
    return field[:1].upper() + field[1:]


def _camel_case_conversion(value: str, separator: str) -> str:
    if not value:
        return value
    return _CAMEL_CASE_RE.sub(lambda m: m.group(1) + separator + m.group(2).lower(), value)


def _separated_to_camel_case(value: str, case_insensitive: bool) -> str:
    if not value:
        return value
    builder = ""
    for field in _SEPARATOR_RE.split(value):
        if case_insensitive:
            field = field.lower()
        builder += _capitalize(field) if builder else field
    if value[-1] in _SEPARATORS:
        builder += value[-1]
    return builder


_MANIPULATIONS: Dict[Manipulation, Callable[[str], str]] = {
    Manipulation.NONE: lambda value: value,
    Manipulation.HYPHEN_TO_UNDERSCORE: lambda value: value.replace("-", "_"),
    Manipulation.UNDERSCORE_TO_PERIOD: lambda value: value.replace("_", "."),
    Manipulation.PERIOD_TO_UNDERSCORE: lambda value: value.replace(".", "_"),
    Manipulation.CAMELCASE_TO_UNDERSCORE: lambda value: _camel_case_conversion(value, "_"),
    Manipulation.CAMELCASE_TO_HYPHEN: lambda value: _camel_case_conversion(value, "-"),
    Manipulation.SEPARATED_TO_CAMELCASE: lambda value: _separated_to_camel_case(value, False),
    Manipulation.CASE_INSENSITIVE_SEPARATED_TO_CAMELCASE: lambda value: _separated_to_camel_case(
        value, True
    ),
}

_VARIATIONS: Dict[Variation, Callable[[str], str]] = {
    Variation.NONE: lambda value: value,
    Variation.LOWERCASE: lambda value: value.lower(),
    Variation.UPPERCASE: lambda value: value.upper(),
}


def apply_manipulation(manipulation: Manipulation, value: str) -> str:
    return _MANIPULATIONS[manipulation](value)


def apply_variation(variation: Variation, value: str) -> str:
    return _VARIATIONS[variation](value)


def expand(key: str) -> Tuple[str, ...]:
    """Return the relaxed spellings of a canonical property key.

    The result is duplicate-free, starts with `key` itself and is a pure
    function of `key`:

    - the key and its hyphenated form (``acceptUsers`` -> ``accept-users``)
      are rewritten by every manipulation/variation pair
      (e.g. ``cas_authn_accept_users``, ``casAuthnAcceptUsers``,
      ``casauthnacceptusers``, ``CAS.AUTHN.ACCEPT_USERS``)
    - every rewrite is folded back to camel case, plain and case-insensitive,
      and that camel form is rewritten the same way, which yields the
      all-hyphen and all-underscore spellings (``cas-authn-accept-users``)
    - the environment variable form (``CAS_AUTHN_ACCEPT_USERS``) is appended

    Queued camel forms keep the key's characters in order and differ only
    in case and a trailing separator, so there are finitely many; each is
    rewritten once and the queue drains.
    """
    seen: Dict[str, None] = {key: None}
    queue: List[str] = [key]
    queued = {key}
    hyphenated = to_hyphenated(key)
    if hyphenated not in queued:
        queue.append(hyphenated)
        queued.add(hyphenated)

    position = 0
    while position < len(queue):
        seed = queue[position]
        position += 1
        for variation in Variation:
            for manipulation in Manipulation:
                value = apply_variation(variation, apply_manipulation(manipulation, seed))
                seen.setdefault(value, None)
                for camel in (
                    _separated_to_camel_case(value, False),
                    _separated_to_camel_case(value, True),
                ):
                    if camel not in queued:
                        queued.add(camel)
                        queue.append(camel)

    seen.setdefault(environment_variable_name(key), None)
    return tuple(seen)
