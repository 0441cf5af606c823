"""
String utilities for ahUtils: casing, random identifiers, HTML escaping.
"""
import random
import re
import string
import uuid as uuid_lib

RANDOM_STRING_ALPHABET = string.ascii_lowercase + string.digits

_HTML_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
    }
_HTML_UNESCAPES = {entity: char for char, entity in _HTML_ESCAPES.items()}

_ESCAPE_RE = re.compile(r"[&<>\"']")
_UNESCAPE_RE = re.compile(r"&(?:amp|lt|gt|quot|#39);")
_SEPARATOR_RE = re.compile(r"[-_\s](\w)")
_UPPER_RE = re.compile(r"([A-Z])")


def camel_case(text: str) -> str:
    """
    Examples:
        >>> camel_case("hello-world_foo bar")
        'helloWorldFooBar'
    """
    return _SEPARATOR_RE.sub(lambda match: match.group(1).upper(), text)


def kebab_case(text: str) -> str:
    """
    Examples:
        >>> kebab_case("helloWorld")
        'hello-world'
        >>> kebab_case("HelloWorld")
        'hello-world'
    """
    return _UPPER_RE.sub(r"-\1", text).lower().removeprefix("-")


def snake_case(text: str) -> str:
    """
    Examples:
        >>> snake_case("helloWorld")
        'hello_world'
    """
    return _UPPER_RE.sub(r"_\1", text).lower().removeprefix("_")


def capitalize(text: str) -> str:
    """Upper-case the first character only (unlike str.capitalize, the rest is kept)."""
    return text[:1].upper() + text[1:]


def random_string(length: int = 8) -> str:
    """Random string of lowercase letters and digits."""
    return "".join(random.choice(RANDOM_STRING_ALPHABET) for _ in range(length))


def uuid() -> str:
    """Random (version 4) UUID in canonical 8-4-4-4-12 form."""
    return str(uuid_lib.uuid4())


def random_hex_color() -> str:
    """Random CSS color such as '#1a2b3c'."""
    return f"#{random.randrange(0x1000000):06x}"


def escape(text: str) -> str:
    """
    Escape the HTML special characters & < > " '.

    Example:
        >>> escape('<a href="x">Tom & Jerry\\'s</a>')
        '&lt;a href=&quot;x&quot;&gt;Tom &amp; Jerry&#39;s&lt;/a&gt;'
    """
    return _ESCAPE_RE.sub(lambda match: _HTML_ESCAPES[match.group(0)], text)


def unescape(text: str) -> str:
    """Reverse of escape(); other entities are left untouched."""
    return _UNESCAPE_RE.sub(lambda match: _HTML_UNESCAPES[match.group(0)], text)


def truncate(text: str, length: int, ellipsis: str = "...") -> str:
    """
    Cut text to `length` characters and append `ellipsis` when it was longer.

    Example:
        >>> truncate("Hello world", 5)
        'Hello...'
    """
    return text[:length] + ellipsis if len(text) > length else text
