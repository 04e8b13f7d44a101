"""Regex building blocks for the case transformations.

Patterns are kept uncompiled here because the flags depend on the charset
of each call. Compile them with `stringy.charsets.Charset.compile`, which
caches the result per pattern and flag combination.
"""

__docformat__ = 'google'

# Base character sets for patterns
SEPARATORS: str = '-_\\s'
"""@private"""

# Building blocks
SEPARATOR_RUN: str = f'[{SEPARATORS}]+'
""" Uncompiled regex building block representing one or more separators.

Separators are dashes, underscores and whitespace."""

DIGIT_RUN: str = '\\d+'
""" Uncompiled regex building block representing one or more digits."""

NEXT_CHARACTER: str = '(.)?'
""" Uncompiled regex building block capturing the character after a run, if any.

Does not match newlines."""

# Patterns
CAMEL_SEPARATOR: str = f'{SEPARATOR_RUN}{NEXT_CHARACTER}'
"""Matches a run of separators and the character that follows it.

Capture groups:
    * 1: the following character, or None at the end of the string

Used in `stringy.transforms.camelize`."""

CAMEL_DIGITS: str = f'{DIGIT_RUN}{NEXT_CHARACTER}'
"""Matches a run of digits and the character that follows it.

The whole match is upper-cased, so a letter after digits is capitalized
while the digits stay in place.

Used in `stringy.transforms.camelize`."""

INNER_WORD_CHARACTER: str = '\\B(\\w)'
"""Matches a word character that is not at the start of a word.

Capture groups:
    * 1: the word character

Used in `stringy.transforms.dasherize` and `stringy.transforms.underscored`,
which insert a delimiter when the captured character is upper case."""

DELIMITER_RUN: str = SEPARATOR_RUN
"""Matches a run of dashes, underscores and whitespace to collapse into one delimiter.

Used in `stringy.transforms.dasherize` and `stringy.transforms.underscored`."""

NON_WHITESPACE_CHARACTER: str = '\\S'
"""Matches a single non-whitespace character.

Used in `stringy.transforms.swap_case`."""

WORD: str = '\\S+'
"""Matches a maximal run of non-whitespace characters.

Used in `stringy.transforms.titleize`."""
