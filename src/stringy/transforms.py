"""Case transformations.

Every function in this module takes the text to transform and a resolved
`stringy.charsets.Charset`, plus any extra arguments the transformation
needs. Arguments are not validated here: call transformations through
`stringy.dispatch.call`, which checks the text and resolves the charset.
"""

__docformat__ = 'google'

__all__ = [
    'upper_case_first',
    'lower_case_first',
    'camelize',
    'upper_camelize',
    'dasherize',
    'underscored',
    'swap_case',
    'titleize'
]

import re
from typing import Iterable, Optional

from stringy.charsets import Charset
from stringy.patterns import (
    CAMEL_SEPARATOR,
    CAMEL_DIGITS,
    INNER_WORD_CHARACTER,
    DELIMITER_RUN,
    NON_WHITESPACE_CHARACTER,
    WORD
)

def upper_case_first(text: str, charset: Charset) -> str:
    """
    Convert the first character of a string to upper case.

    Args:
        text: String to modify
        charset: Resolved character set

    Returns:
        String with the first character in upper case

    Example:
        >>> upper_case_first('test', resolve('utf-8'))
        'Test'
        >>> upper_case_first('ñandú', resolve('utf-8'))
        'Ñandú'
    """
    return charset.upper(text[:1]) + text[1:]

def lower_case_first(text: str, charset: Charset) -> str:
    """
    Convert the first character of a string to lower case.

    Args:
        text: String to modify
        charset: Resolved character set

    Returns:
        String with the first character in lower case

    Example:
        >>> lower_case_first('Test', resolve('utf-8'))
        'test'
    """
    return charset.lower(text[:1]) + text[1:]

def camelize(text: str, charset: Charset) -> str:
    """
    Return a camelCase version of a string.

    Trims surrounding whitespace, capitalizes letters following digits,
    spaces, dashes and underscores, and removes spaces, dashes and underscores.

    Args:
        text: String to convert
        charset: Resolved character set

    Returns:
        String in camelCase

    Example:
        >>> camelize(' my-sample_2Test string ', resolve('utf-8'))
        'mySample2TestString'
        >>> camelize('CamelCase', resolve('utf-8'))
        'camelCase'
    """
    def capitalize_next(match: re.Match) -> str:
        following = match.group(1)
        return charset.upper(following) if following is not None else ''

    def capitalize_run(match: re.Match) -> str:
        return charset.upper(match.group(0))

    camel_case = charset.compile(CAMEL_SEPARATOR).sub(
        capitalize_next,
        lower_case_first(charset.trim(text), charset)
    )
    return charset.compile(CAMEL_DIGITS).sub(capitalize_run, camel_case)

def upper_camelize(text: str, charset: Charset) -> str:
    """
    Return an UpperCamelCase version of a string.

    Same rules as `camelize`, with the first character upper-cased.

    Example:
        >>> upper_camelize('my_sample-2 test', resolve('utf-8'))
        'MySample2Test'
    """
    return upper_case_first(camelize(text, charset), charset)

def _delimit(text: str, charset: Charset, delimiter: str) -> str:
    def insert_delimiter(match: re.Match) -> str:
        char = match.group(1)
        return delimiter + char if charset.is_upper(char) else char

    delimited = charset.compile(INNER_WORD_CHARACTER).sub(insert_delimiter, charset.trim(text))
    delimited = charset.compile(DELIMITER_RUN).sub(delimiter, delimited)
    return charset.lower(delimited)

def dasherize(text: str, charset: Charset) -> str:
    """
    Return a lower-case, trimmed string separated by dashes.

    Dashes are inserted before upper-case characters (except at the start
    of a word), and in place of spaces and underscores.

    Example:
        >>> dasherize('MySampleTest', resolve('utf-8'))
        'my-sample-test'
        >>> dasherize('  test_case  string', resolve('utf-8'))
        'test-case-string'
    """
    return _delimit(text, charset, '-')

def underscored(text: str, charset: Charset) -> str:
    """
    Return a lower-case, trimmed string separated by underscores.

    Underscores are inserted before upper-case characters (except at the
    start of a word), and in place of spaces and dashes.

    Example:
        >>> underscored('MySampleTest', resolve('utf-8'))
        'my_sample_test'
    """
    return _delimit(text, charset, '_')

def swap_case(text: str, charset: Charset) -> str:
    """
    Return a case-swapped version of a string.

    A character that equals its own upper-case form is lower-cased; any
    other character is upper-cased. Caseless characters such as digits
    therefore take the lower-case branch and come back unchanged.

    Example:
        >>> swap_case('Ñandú 42', resolve('utf-8'))
        'ñANDÚ 42'
    """
    def swap(match: re.Match) -> str:
        char = match.group(0)
        if char == charset.upper(char):
            return charset.lower(char)
        return charset.upper(char)

    return charset.compile(NON_WHITESPACE_CHARACTER).sub(swap, text)

def titleize(text: str, charset: Charset, ignore: Optional[Iterable[str]] = None) -> str:
    """
    Capitalize the first letter of each word in a string, after trimming.

    Only the first character of a word is touched, so acronyms keep their
    case. Words found in `ignore` are left exactly as they are.

    Args:
        text: String to titleize
        charset: Resolved character set
        ignore: Words not to capitalize. A single string counts as one word.

    Example:
        >>> titleize('a simple test of the API', resolve('utf-8'), ['of', 'the'])
        'A Simple Test of the API'
    """
    if isinstance(ignore, str):
        ignore = [ignore]
    ignored = frozenset(ignore or ())

    def capitalize(match: re.Match) -> str:
        word = match.group(0)
        if word in ignored:
            return word
        return upper_case_first(word, charset)

    return charset.compile(WORD).sub(capitalize, charset.trim(text))
