"""Character sets and the process-wide default encoding.

Every transformation receives a `Charset` rather than a bare encoding
name. The charset decides which regex flags apply and which code points
may change case, so nothing about matching depends on global state.
"""

__docformat__ = 'google'

__all__ = [
    'Charset',
    'resolve',
    'get_default_encoding',
    'set_default_encoding'
]

import codecs
import re
import sys
from dataclasses import dataclass
from functools import cache, cached_property

UNIVERSAL_CODECS = ['utf-8', 'utf-16', 'utf-16-le', 'utf-16-be', 'utf-32', 'utf-32-le', 'utf-32-be']
"""Canonical codec names that can represent every code point."""

ASCII_WHITESPACE: str = ' \t\n\r\x0b\x0c'
"""Characters stripped by `Charset.trim` under the ascii codec."""

_default_encoding: str = codecs.lookup(sys.getdefaultencoding()).name

def get_default_encoding() -> str:
    """
    Return the canonical name of the current default encoding.

    Example:
        >>> get_default_encoding()
        'utf-8'
    """
    return _default_encoding

def set_default_encoding(encoding: str) -> str:
    """
    Replace the default encoding used when a call does not supply one.

    Args:
        encoding: Any codec name or alias known to `codecs`

    Returns:
        The canonical name that was stored

    Raises:
        LookupError: If the encoding is unknown

    Example:
        >>> set_default_encoding('UTF8')
        'utf-8'
    """
    global _default_encoding
    _default_encoding = codecs.lookup(encoding).name
    return _default_encoding

@cache
def _compile(pattern: str, flags: int) -> re.Pattern:
    return re.compile(pattern, flags)

@dataclass(frozen=True)
class Charset:
    """
    A resolved character encoding.

    Args:
        name: Canonical codec name, as returned by `codecs.lookup`

    Use `resolve` rather than building one directly, so aliases such as
    'UTF8' or 'latin1' map to the same charset.
    """
    name: str

    @cached_property
    def universal(self) -> bool:
        return self.name in UNIVERSAL_CODECS

    @cached_property
    def flags(self) -> int:
        """Regex flags for matching under this charset."""
        return re.ASCII if self.name == 'ascii' else re.UNICODE

    def compile(self, pattern: str) -> re.Pattern:
        """Compile a pattern from `stringy.patterns` with this charset's flags."""
        return _compile(pattern, self.flags)

    def encodable(self, text: str) -> bool:
        try:
            text.encode(self.name)
        except UnicodeEncodeError:
            return False
        return True

    def upper(self, text: str) -> str:
        """
        Upper-case every code point that has a mapping inside this charset.

        Example:
            >>> resolve('utf-8').upper('ñandú')
            'ÑANDÚ'
            >>> resolve('ascii').upper('ñandú')
            'ñANDú'
        """
        if self.universal:
            return text.upper()
        return ''.join(map(self._upper_char, text))

    def lower(self, text: str) -> str:
        """
        Lower-case every code point that has a mapping inside this charset.
        """
        if self.universal:
            return text.lower()
        return ''.join(map(self._lower_char, text))

    def is_upper(self, char: str) -> bool:
        """
        Check if a character has a lower-case mapping inside this charset.

        Example:
            >>> resolve('latin-1').is_upper('É')
            True
            >>> resolve('latin-1').is_upper('Σ')
            False
        """
        return char != self.lower(char)

    def trim(self, text: str) -> str:
        """Strip surrounding whitespace as recognized by this charset."""
        if self.name == 'ascii':
            return text.strip(ASCII_WHITESPACE)
        return text.strip()

    def _upper_char(self, char: str) -> str:
        mapped = char.upper()
        if mapped != char and self.encodable(char) and self.encodable(mapped):
            return mapped
        return char

    def _lower_char(self, char: str) -> str:
        mapped = char.lower()
        if mapped != char and self.encodable(char) and self.encodable(mapped):
            return mapped
        return char

@cache
def _resolve_canonical(name: str) -> Charset:
    return Charset(name)

def resolve(encoding: str) -> Charset:
    """
    Resolve an encoding name or alias to a `Charset`.

    Args:
        encoding: Any codec name or alias known to `codecs`

    Raises:
        LookupError: If the encoding is unknown

    Example:
        >>> resolve('UTF8')
        Charset(name='utf-8')
        >>> resolve('latin1').name
        'iso8859-1'
    """
    return _resolve_canonical(codecs.lookup(encoding).name)
