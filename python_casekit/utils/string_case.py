"""String case conversion utilities.

Every converter is total: a non-string value yields ``""`` instead of an
error. Words are found with the ASCII predicates below, never with regular
expressions, so ``é`` or ``ß`` act as separators just like ``-`` or ``_``.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List

from errors import UnknownCaseStyleError

logger = logging.getLogger(__name__)

# Whitespace as understood by ECMAScript trim() and \s. Unlike str.isspace()
# this excludes the \x1c-\x1f separators and \x85, and includes \ufeff.
WHITESPACE = " \t\n\v\f\r\u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"


def is_letter_or_digit(ch: str) -> bool:
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z") or ("0" <= ch <= "9")


def is_upper(ch: str) -> bool:
    return "A" <= ch <= "Z"


def is_lower_or_digit(ch: str) -> bool:
    return ("a" <= ch <= "z") or ("0" <= ch <= "9")


def _reject(func_name: str, value: Any) -> str:
    type_name = type(value).__name__
    logger.debug(
        f"{func_name} received non-string input of type {type_name}",
        extra={"data": {"func": func_name, "type": type_name}},
    )
    return ""


def split_words(value: str) -> List[str]:
    """Split on maximal runs of characters that are not ASCII letters or digits."""
    words: List[str] = []
    current: List[str] = []
    for ch in value:
        if is_letter_or_digit(ch):
            current.append(ch)
        elif current:
            words.append("".join(current))
            current = []
    if current:
        words.append("".join(current))
    return words


def split_words_camel(value: str) -> List[str]:
    """Like :func:`split_words`, also breaking at lower/digit -> upper transitions."""
    words: List[str] = []
    for word in split_words(value):
        start = 0
        for i in range(1, len(word)):
            if is_lower_or_digit(word[i - 1]) and is_upper(word[i]):
                words.append(word[start:i])
                start = i
        words.append(word[start:])
    return words


def _capitalize(word: str) -> str:
    word = word.lower()
    return word[:1].upper() + word[1:]


def to_camel_case(value: Any) -> str:
    """
    Convert to camelCase.

    >>> to_camel_case("SCREEN_NAME")
    'screenName'
    """
    if not isinstance(value, str):
        return _reject("to_camel_case", value)

    words = split_words(value)
    if not words:
        return ""

    result = [words[0].lower()]
    result.extend(_capitalize(word) for word in words[1:])
    return "".join(result)


def to_pascal_case(value: Any) -> str:
    if not isinstance(value, str):
        return _reject("to_pascal_case", value)
    return "".join(_capitalize(word) for word in split_words(value))


def to_kebab_case(value: Any) -> str:
    """
    Convert to kebab-case.

    Only whitespace and underscores become dashes; any other punctuation
    (including existing dashes) is kept as-is.

    >>> to_kebab_case("  myVariable_name ")
    'my-variable-name'
    """
    if not isinstance(value, str):
        return _reject("to_kebab_case", value)

    result = []
    prev = ""
    in_separator = False
    for ch in value.strip(WHITESPACE):
        if ch in WHITESPACE or ch == "_":
            if not in_separator:
                result.append("-")
                in_separator = True
        else:
            if is_lower_or_digit(prev) and is_upper(ch):
                result.append("-")
            result.append(ch)
            in_separator = False
        prev = ch
    return "".join(result).lower()


def to_dot_case(value: Any) -> str:
    """
    Convert to dot.case.

    >>> to_dot_case("someCamelCase")
    'some.camel.case'
    """
    if not isinstance(value, str):
        return _reject("to_dot_case", value)
    return ".".join(split_words_camel(value)).lower()


def to_snake_case(value: Any) -> str:
    if not isinstance(value, str):
        return _reject("to_snake_case", value)
    return "_".join(split_words_camel(value)).lower()


def to_constant_case(value: Any) -> str:
    if not isinstance(value, str):
        return _reject("to_constant_case", value)
    return "_".join(split_words_camel(value)).upper()


CASE_STYLES: Dict[str, Callable[[Any], str]] = {
    "camel": to_camel_case,
    "kebab": to_kebab_case,
    "dot": to_dot_case,
    "snake": to_snake_case,
    "pascal": to_pascal_case,
    "constant": to_constant_case,
}


def normalize_style(style: str) -> str:
    """Map ``"Kebab-Case"``, ``" dot_case "`` etc. onto a registry key."""
    if not isinstance(style, str):
        raise UnknownCaseStyleError(style, sorted(CASE_STYLES))
    name = style.strip().lower()
    for suffix in ("-case", "_case", " case"):
        if name.endswith(suffix):
            name = name[: -len(suffix)]
            break
    if name not in CASE_STYLES:
        raise UnknownCaseStyleError(style, sorted(CASE_STYLES))
    return name


def convert(value: Any, style: str) -> str:
    """Apply the converter registered under ``style``.

    Raises UnknownCaseStyleError for an unregistered style; the converters
    themselves never raise.
    """
    return CASE_STYLES[normalize_style(style)](value)
