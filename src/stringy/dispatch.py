"""The single entry point for every case transformation.

`call` checks that the requested method is in the catalog and that the
text argument is a string, fills in the default encoding when the caller
omitted one, and forwards the call to `stringy.transforms`.
"""

__docformat__ = 'google'

__all__ = [
    'Method',
    'CATALOG',
    'lookup',
    'call',
    'Stringy'
]

import logging
from enum import Enum
from functools import partial
from typing import Callable, Dict

from stringy import transforms
from stringy.charsets import resolve, get_default_encoding
from stringy.errors import UnknownMethod, InvalidArgument

logger = logging.getLogger(__name__)

class Method(Enum):
    """
    Enumeration of the transformations available through `call`.
    """
    UPPER_CASE_FIRST = "upper_case_first"
    LOWER_CASE_FIRST = "lower_case_first"
    CAMELIZE = "camelize"
    UPPER_CAMELIZE = "upper_camelize"
    DASHERIZE = "dasherize"
    UNDERSCORED = "underscored"
    SWAP_CASE = "swap_case"
    TITLEIZE = "titleize"

CATALOG: Dict[Method, Callable[..., str]] = {
    Method.UPPER_CASE_FIRST: transforms.upper_case_first,
    Method.LOWER_CASE_FIRST: transforms.lower_case_first,
    Method.CAMELIZE: transforms.camelize,
    Method.UPPER_CAMELIZE: transforms.upper_camelize,
    Method.DASHERIZE: transforms.dasherize,
    Method.UNDERSCORED: transforms.underscored,
    Method.SWAP_CASE: transforms.swap_case,
    Method.TITLEIZE: transforms.titleize
}
"""Transformation functions keyed by method."""

def lookup(method) -> Method:
    """
    Return the `Method` for a member or its string value.

    Raises:
        UnknownMethod: If the method is not in the catalog

    Example:
        >>> lookup('camelize')
        <Method.CAMELIZE: 'camelize'>
    """
    if isinstance(method, Method):
        return method
    try:
        return Method(method)
    except ValueError:
        raise UnknownMethod(method) from None

def call(method, *args) -> str:
    """
    Run a named transformation.

    Args:
        method: A `Method` member or its string value
        *args: The text, then optionally the encoding, then any extra
            arguments the transformation takes (e.g. the ignore list for
            titleize)

    Returns:
        The transformed string

    Raises:
        UnknownMethod: If the method is not in the catalog
        InvalidArgument: If the text argument is missing or not a string
        LookupError: If the encoding is unknown

    Example:
        >>> call('camelize', 'my-sample test')
        'mySampleTest'
        >>> call(Method.TITLEIZE, 'a test of the api', None, ['of', 'the'])
        'A Test of the Api'
    """
    function = CATALOG[lookup(method)]

    text = args[0] if args else None
    if not isinstance(text, str):
        raise InvalidArgument(type(text).__name__, 0)

    encoding = args[1] if len(args) > 1 else None
    defaulted = not encoding
    charset = resolve(get_default_encoding() if defaulted else encoding)

    logger.debug(
        f"Calling {function.__name__} with encoding {charset.name}"
        f"{' (default)' if defaulted else ''}"
    )
    return function(text, charset, *args[2:])

class _Dispatching(type):
    def __getattr__(cls, name: str):
        return partial(call, lookup(name))

class Stringy(metaclass=_Dispatching):
    """
    Attribute-style access to `call`.

    Any method in the catalog can be used as a class attribute; unknown
    names raise `UnknownMethod`.

    Example:
        >>> Stringy.dasherize('MySampleTest')
        'my-sample-test'
        >>> Stringy.upper_camelize('my_sample-2 test', 'utf-8')
        'MySample2Test'
    """
