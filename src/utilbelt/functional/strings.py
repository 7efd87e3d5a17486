"""String helpers: case conversion, validation, slicing, formatting, encoding.

Every function takes the string it operates on as its first argument and
returns a new value; strings are immutable so nothing here mutates.

Conventions:
    - Case converters return ``""`` for ``""`` and tokenize with
      :func:`split_words`, which breaks on runs of whitespace, underscores and
      hyphens as well as on lower-to-upper letter transitions
      (``"helloWorld" -> ["hello", "World"]``).
    - Validation predicates are fixed regular-expression matches and return
      ``False`` for ``""``.
    - Delimiter searches differ in what they return on a miss: the
      ``between``/``before``/``after`` family returns ``""``, while the
      ``remove_*`` and ``replace_*`` families return the input unchanged.

Examples:
    >>> from utilbelt.functional import strings
    >>> strings.to_snake_case("helloWorld")
    'hello_world'
    >>> strings.between("hello [world] foo", "[", "]")
    'world'
    >>> strings.format("Hello {0}, you are {1}!", "World", "awesome")
    'Hello World, you are awesome!'
"""

import base64
import re
import typing as tp

from utilbelt.core.config import settings
from utilbelt.core.data_models import Color
from utilbelt.logger.logger import logger

__all__ = [
    # Case conversion
    "split_words",
    "capitalize",
    "uncapitalize",
    "title_case",
    "to_camel_case",
    "to_pascal_case",
    "to_snake_case",
    "to_kebab_case",
    "to_train_case",
    "to_dot_case",
    "underscore",
    "humanize",
    # Inflection
    "pluralize",
    "tableize",
    "foreign_key",
    "constantize",
    "sequenceize",
    "pathize",
    "variablize",
    # Validation
    "is_email",
    "is_digits",
    "is_alpha",
    "is_alphanumeric",
    "is_url",
    "is_phone_number",
    "is_hex_color",
    "is_ipv4",
    "is_ipv6",
    "is_strong_password",
    "is_palindrome",
    # Substrings
    "between",
    "between_last",
    "before",
    "after",
    "before_last",
    "after_last",
    "drop_left",
    "drop_right",
    "drop_left_while",
    "drop_right_while",
    "remove_prefix",
    "remove_suffix",
    "remove_surrounding",
    "replace_after_first",
    "replace_after_last",
    "replace_before_first",
    "replace_before_last",
    "replace_range",
    # Formatting and encoding
    "format",
    "format_map",
    "to_bytes",
    "to_base64",
    "from_base64",
    "escape",
    "to_html_text",
    # Misc
    "mask",
    "truncate",
    "initials",
    "to_slug",
    "reverse",
    "strip_html",
    "repeat",
    "count_occurrences",
    "word_count",
    "char_count",
    "vowel_count",
    "consonant_count",
    "syllable_count",
    "sentence_count",
    "equals_ignore_case",
    "contains_ignore_case",
    "to_color",
]

_SEPARATORS = re.compile(r"[\s_\-]+")
_CASE_BOUNDARY = re.compile(r"(?<=[a-z])(?=[A-Z])")
_INNER_CAPITAL = re.compile(r"(?<=.)([A-Z])")
_NON_ALPHANUMERIC = re.compile(r"[^a-zA-Z0-9]")

_EMAIL = re.compile(r"^[a-zA-Z0-9_.+-]+@[a-zA-Z0-9-]+\.[a-zA-Z0-9-.]+$")
_DIGITS = re.compile(r"^[0-9]+$")
_ALPHA = re.compile(r"^[a-zA-Z]+$")
_ALPHANUMERIC = re.compile(r"^[a-zA-Z0-9]+$")
_URL = re.compile(r"^https?://[^\s/$.?#][^\s]*\.[^\s]+$|^https?://localhost(:\d+)?(/\S*)?$", re.IGNORECASE)
_PHONE = re.compile(r"^\+?[0-9\s\-().]{7,20}$")
_HEX_COLOR = re.compile(r"^#?([a-fA-F0-9]{6}|[a-fA-F0-9]{3})$")
_OCTET = r"(25[0-5]|2[0-4][0-9]|1[0-9]{2}|[1-9]?[0-9])"
_IPV4 = re.compile(rf"^({_OCTET}\.){{3}}{_OCTET}$")
_HEXTET = r"[0-9a-fA-F]{1,4}"
_IPV6 = re.compile(
    r"^("
    rf"({_HEXTET}:){{7}}{_HEXTET}"
    rf"|({_HEXTET}:){{1,7}}:"
    rf"|({_HEXTET}:){{1,6}}:{_HEXTET}"
    rf"|({_HEXTET}:){{1,5}}(:{_HEXTET}){{1,2}}"
    rf"|({_HEXTET}:){{1,4}}(:{_HEXTET}){{1,3}}"
    rf"|({_HEXTET}:){{1,3}}(:{_HEXTET}){{1,4}}"
    rf"|({_HEXTET}:){{1,2}}(:{_HEXTET}){{1,5}}"
    rf"|{_HEXTET}:(:{_HEXTET}){{1,6}}"
    rf"|:((:{_HEXTET}){{1,7}}|:)"
    r")$"
)
_STRONG_PASSWORD = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*[0-9])(?=.*[^a-zA-Z0-9]).{8,}$")

_POSITIONAL_PLACEHOLDER = re.compile(r"\{(\d+)\}")
_NAMED_PLACEHOLDER = re.compile(r"\{(\w+)\}")
_HTML_TAG = re.compile(r"<[^>]*>")
_HTML_ENTITIES = {"<": "&lt;", ">": "&gt;", "&": "&amp;", '"': "&quot;"}
_SLUG_INVALID = re.compile(r"[^\w\s-]")
_SLUG_SEPARATOR = re.compile(r"[\s_-]+")
_VOWELS = frozenset("aeiou")
_VOWEL_GROUP = re.compile(r"[aeiouy]+")
_SENTENCE_END = re.compile(r"[.!?]+")


# --- Case conversion -------------------------------------------------------


def split_words(value: str) -> tp.List[str]:
    """Split a string into words for case conversion.

    Words are separated by runs of whitespace, underscores or hyphens, and by
    a lower-case letter followed by an upper-case one.

    Args:
        value: The string to split.

    Returns:
        The non-empty words in order.

    Example:
        >>> split_words("hello_world fooBar")
        ['hello', 'world', 'foo', 'Bar']
    """
    words: tp.List[str] = []
    for chunk in _SEPARATORS.split(value):
        words.extend(word for word in _CASE_BOUNDARY.split(chunk) if word)
    return words


def _cap_word(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def capitalize(value: str) -> str:
    """Upper-case the first character, leaving the rest untouched."""
    return value[:1].upper() + value[1:]


def uncapitalize(value: str) -> str:
    """Lower-case the first character, leaving the rest untouched."""
    return value[:1].lower() + value[1:]


def title_case(value: str) -> str:
    """Capitalize the first character of each space-separated word."""
    return " ".join(capitalize(word) for word in value.split(" "))


def to_camel_case(value: str) -> str:
    words = split_words(value)
    if not words:
        return ""
    return words[0].lower() + "".join(_cap_word(word) for word in words[1:])


def to_pascal_case(value: str) -> str:
    return "".join(_cap_word(word) for word in split_words(value))


def to_snake_case(value: str) -> str:
    return "_".join(word.lower() for word in split_words(value))


def to_kebab_case(value: str) -> str:
    return "-".join(word.lower() for word in split_words(value))


def to_train_case(value: str) -> str:
    """Convert to Train-Case (``"hello world"`` -> ``"Hello-World"``)."""
    return "-".join(_cap_word(word) for word in split_words(value))


def to_dot_case(value: str) -> str:
    return ".".join(word.lower() for word in split_words(value))


def underscore(value: str) -> str:
    """Lower-case a camelized string, inserting ``_`` before inner capitals.

    Example:
        >>> underscore("UserAccount")
        'user_account'
    """
    return _INNER_CAPITAL.sub(r"_\1", value).lower()


def humanize(value: str) -> str:
    """Turn an identifier into lower-case words (``"userName"`` -> ``"user name"``)."""
    return " ".join(split_words(value)).lower()


# --- Inflection ------------------------------------------------------------


def pluralize(value: str) -> str:
    """Naive plural: append ``s`` to any non-empty string."""
    return f"{value}s" if value else ""


def tableize(value: str) -> str:
    """Table name for a class name (``"UserAccount"`` -> ``"user_accounts"``)."""
    return underscore(pluralize(value))


def variablize(value: str) -> str:
    """Variable name: first character lowered, non-alphanumerics dropped."""
    return _NON_ALPHANUMERIC.sub("", uncapitalize(value))


def foreign_key(value: str) -> str:
    """Foreign key column name (``"User"`` -> ``"user_id"``)."""
    return f"{variablize(value)}_id" if value else ""


def constantize(value: str) -> str:
    """Constant name: upper-cased, non-alphanumerics replaced by ``_``."""
    return _NON_ALPHANUMERIC.sub("_", value.upper())


def sequenceize(value: str) -> str:
    """Sequence name (``"UserAccount"`` -> ``"user_account_seq"``)."""
    return f"{underscore(value)}_seq" if value else ""


def pathize(value: str) -> str:
    """Path name (``"UserAccount"`` -> ``"user/account"``)."""
    return underscore(value).replace("_", "/")


# --- Validation ------------------------------------------------------------


def is_email(value: str) -> bool:
    return bool(_EMAIL.match(value))


def is_digits(value: str) -> bool:
    return bool(_DIGITS.match(value))


def is_alpha(value: str) -> bool:
    return bool(_ALPHA.match(value))


def is_alphanumeric(value: str) -> bool:
    return bool(_ALPHANUMERIC.match(value))


def is_url(value: str) -> bool:
    """Check for an absolute ``http``/``https`` URL with a dotted host."""
    return bool(_URL.match(value))


def is_phone_number(value: str) -> bool:
    """Check for a phone number of 7 to 15 digits.

    An optional leading ``+`` is allowed, and digits may be grouped with
    spaces, hyphens, dots or parentheses (``"+1 (800) 555-1234"``).
    """
    if not _PHONE.match(value):
        return False
    digits = sum(ch.isdigit() for ch in value)
    return 7 <= digits <= 15


def is_hex_color(value: str) -> bool:
    """Check for ``#RGB`` or ``#RRGGBB`` (the ``#`` is optional)."""
    return bool(_HEX_COLOR.match(value))


def is_ipv4(value: str) -> bool:
    return bool(_IPV4.match(value))


def is_ipv6(value: str) -> bool:
    """Check for an IPv6 address in full or ``::``-compressed notation."""
    return bool(_IPV6.match(value))


def is_strong_password(value: str) -> bool:
    """At least 8 characters with a lower, an upper, a digit and a symbol."""
    return bool(_STRONG_PASSWORD.match(value))


def is_palindrome(value: str) -> bool:
    """Compare the lower-cased alphanumeric characters with their reverse.

    Example:
        >>> is_palindrome("A man a plan a canal Panama")
        True
    """
    cleaned = _NON_ALPHANUMERIC.sub("", value.lower())
    if not cleaned:
        return False
    return cleaned == cleaned[::-1]


# --- Substrings ------------------------------------------------------------


def between(value: str, start: str, end: str) -> str:
    """Text between the first ``start`` and the next ``end`` after it.

    Returns ``""`` if either delimiter is missing.
    """
    start_index = value.find(start)
    if start_index == -1:
        return ""
    start_index += len(start)
    end_index = value.find(end, start_index)
    if end_index == -1:
        return ""
    return value[start_index:end_index]


def between_last(value: str, start: str, end: str) -> str:
    """Text between the last ``start`` and the next ``end`` after it."""
    start_index = value.rfind(start)
    if start_index == -1:
        return ""
    start_index += len(start)
    end_index = value.find(end, start_index)
    if end_index == -1:
        return ""
    return value[start_index:end_index]


def before(value: str, delimiter: str) -> str:
    index = value.find(delimiter)
    return "" if index == -1 else value[:index]


def after(value: str, delimiter: str) -> str:
    index = value.find(delimiter)
    return "" if index == -1 else value[index + len(delimiter) :]


def before_last(value: str, delimiter: str) -> str:
    index = value.rfind(delimiter)
    return "" if index == -1 else value[:index]


def after_last(value: str, delimiter: str) -> str:
    index = value.rfind(delimiter)
    return "" if index == -1 else value[index + len(delimiter) :]


def drop_left(value: str, n: int) -> str:
    """Drop the first ``n`` characters.

    Raises:
        ValueError: If ``n`` is negative.
    """
    if n < 0:
        raise ValueError(f"Cannot drop a negative number of characters: {n}")
    return value[n:]


def drop_right(value: str, n: int) -> str:
    """Drop the last ``n`` characters.

    Raises:
        ValueError: If ``n`` is negative.
    """
    if n < 0:
        raise ValueError(f"Cannot drop a negative number of characters: {n}")
    if n >= len(value):
        return ""
    return value[: len(value) - n]


def drop_left_while(value: str, predicate: tp.Callable[[str], bool]) -> str:
    index = 0
    while index < len(value) and predicate(value[index]):
        index += 1
    return value[index:]


def drop_right_while(value: str, predicate: tp.Callable[[str], bool]) -> str:
    index = len(value)
    while index > 0 and predicate(value[index - 1]):
        index -= 1
    return value[:index]


def remove_prefix(value: str, prefix: str) -> str:
    return value[len(prefix) :] if prefix and value.startswith(prefix) else value


def remove_suffix(value: str, suffix: str) -> str:
    return value[: len(value) - len(suffix)] if suffix and value.endswith(suffix) else value


def remove_surrounding(value: str, delimiter: str) -> str:
    """Remove ``delimiter`` from both ends, where present."""
    return remove_suffix(remove_prefix(value, delimiter), delimiter)


def replace_after_first(value: str, delimiter: str, replacement: str) -> str:
    index = value.find(delimiter)
    if index == -1:
        return value
    return value[: index + len(delimiter)] + replacement


def replace_after_last(value: str, delimiter: str, replacement: str) -> str:
    index = value.rfind(delimiter)
    if index == -1:
        return value
    return value[: index + len(delimiter)] + replacement


def replace_before_first(value: str, delimiter: str, replacement: str) -> str:
    index = value.find(delimiter)
    if index == -1:
        return value
    return replacement + value[index:]


def replace_before_last(value: str, delimiter: str, replacement: str) -> str:
    index = value.rfind(delimiter)
    if index == -1:
        return value
    return replacement + value[index:]


def replace_range(value: str, start: int, end: int, replacement: str) -> str:
    """Replace ``value[start:end]`` with ``replacement``.

    Raises:
        ValueError: If the bounds are negative, reversed or past the end.
    """
    if start < 0 or end < 0:
        raise ValueError(f"Range bounds must be non-negative, got {start}..{end}")
    if start > end:
        raise ValueError(f"Range start {start} is after end {end}")
    if end > len(value):
        raise ValueError(f"Range end {end} exceeds length {len(value)}")
    return value[:start] + replacement + value[end:]


# --- Formatting and encoding ----------------------------------------------


def format(template: str, *args: tp.Any) -> str:
    """Substitute ``{0}``, ``{1}``, ... placeholders with positional arguments.

    Raises:
        IndexError: If a placeholder refers to a missing argument.
    """

    def substitute(match: re.Match) -> str:
        index = int(match.group(1))
        if index >= len(args):
            raise IndexError(
                f"Placeholder {{{index}}} is out of range for {len(args)} argument(s)"
            )
        return str(args[index])

    return _POSITIONAL_PLACEHOLDER.sub(substitute, template)


def format_map(template: str, values: tp.Mapping[str, tp.Any]) -> str:
    """Substitute ``{name}`` placeholders with values from a mapping.

    Raises:
        KeyError: If a placeholder names a missing key.
    """

    def substitute(match: re.Match) -> str:
        key = match.group(1)
        if key not in values:
            raise KeyError(f"No value for placeholder {{{key}}}")
        return str(values[key])

    return _NAMED_PLACEHOLDER.sub(substitute, template)


def to_bytes(value: str) -> bytes:
    return value.encode("utf-8")


def to_base64(value: str) -> str:
    return base64.b64encode(value.encode("utf-8")).decode("ascii")


def from_base64(value: str) -> str:
    """Decode a Base64 string produced by :func:`to_base64`."""
    return base64.b64decode(value, validate=True).decode("utf-8")


def escape(value: str) -> str:
    """Backslash-escape backslashes and double quotes."""
    return value.replace("\\", "\\\\").replace('"', '\\"')


def to_html_text(value: str) -> str:
    """Escape ``<``, ``>``, ``&`` and ``"`` as HTML entities."""
    return "".join(_HTML_ENTITIES.get(ch, ch) for ch in value)


# --- Misc ------------------------------------------------------------------


def mask(
    value: str,
    keep_first: int = 0,
    keep_last: int = 4,
    mask_char: tp.Optional[str] = None,
) -> str:
    """Replace the middle of a string with a mask character.

    Strings no longer than ``keep_first + keep_last`` are returned unchanged.

    Example:
        >>> mask("4111111111111111", keep_first=4)
        '4111********1111'
    """
    mask_char = mask_char if mask_char is not None else settings.MASK_CHAR
    if len(value) <= keep_first + keep_last:
        return value
    hidden = len(value) - keep_first - keep_last
    return value[:keep_first] + mask_char * hidden + value[len(value) - keep_last :]


def truncate(value: str, length: int, ellipsis: tp.Optional[str] = None) -> str:
    """Cut to ``length`` characters, appending an ellipsis only when cut."""
    ellipsis = ellipsis if ellipsis is not None else settings.ELLIPSIS
    if len(value) <= length:
        return value
    return value[:length] + ellipsis


def initials(value: str, max: int = 2) -> str:
    """Upper-cased first letters of up to ``max`` whitespace-separated words."""
    return "".join(word[0].upper() for word in value.split()[:max])


def to_slug(value: str) -> str:
    """URL slug: lower-cased, punctuation stripped, words joined by ``-``.

    Example:
        >>> to_slug("Hello World! 123")
        'hello-world-123'
    """
    cleaned = _SLUG_INVALID.sub("", value.lower().strip())
    return _SLUG_SEPARATOR.sub("-", cleaned).strip("-")


def reverse(value: str) -> str:
    return value[::-1]


def strip_html(value: str) -> str:
    return _HTML_TAG.sub("", value)


def repeat(value: str, times: int, separator: str = "") -> str:
    """Join ``times`` copies of ``value`` with ``separator``.

    Raises:
        ValueError: If ``times`` is negative.
    """
    if times < 0:
        raise ValueError(f"Cannot repeat a negative number of times: {times}")
    return separator.join([value] * times)


def count_occurrences(value: str, substring: str) -> int:
    """Count non-overlapping occurrences; an empty substring counts as 0."""
    if not substring:
        return 0
    return value.count(substring)


def word_count(value: str) -> int:
    return len(value.split())


def char_count(value: str) -> int:
    return len(value)


def vowel_count(value: str) -> int:
    return sum(1 for ch in value.lower() if ch in _VOWELS)


def consonant_count(value: str) -> int:
    return sum(1 for ch in value.lower() if ch.isalpha() and ch not in _VOWELS)


def syllable_count(value: str) -> int:
    """Rough syllable estimate: the number of vowel groups (``y`` included).

    Example:
        >>> syllable_count("beautiful day")
        4
    """
    return len(_VOWEL_GROUP.findall(value.lower()))


def sentence_count(value: str) -> int:
    """Non-blank runs of text separated by ``.``, ``!`` or ``?``."""
    return sum(1 for part in _SENTENCE_END.split(value) if part.strip())


def equals_ignore_case(value: str, other: str) -> bool:
    return value.casefold() == other.casefold()


def contains_ignore_case(value: str, substring: str) -> bool:
    return substring.casefold() in value.casefold()


def to_color(value: str) -> tp.Optional[Color]:
    """Parse a ``#RGB`` / ``#RRGGBB`` string into a :class:`Color`.

    Returns:
        The opaque colour, or ``None`` if the string is not a hex colour.
    """
    if not is_hex_color(value):
        logger.debug(f"'{value}' is not a hex color, returning None")
        return None
    return Color.from_hex(value)
