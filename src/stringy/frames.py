"""Apply case transformations to pandas objects.

Useful for normalizing column names and categorical values in bulk, e.g.
turning spreadsheet headers into snake_case identifiers.
"""

__docformat__ = 'google'

__all__ = [
    'transform_series',
    'rename_columns'
]

import logging
from functools import partial

import pandas as pd

from stringy.charsets import resolve, get_default_encoding
from stringy.dispatch import call, lookup

logger = logging.getLogger(__name__)

def _bind(method, encoding, extra):
    method = lookup(method)
    charset = resolve(encoding or get_default_encoding())
    return method, partial(_apply, method, charset.name, extra)

def _apply(method, encoding, extra, value):
    return call(method, value, encoding, *extra)

def transform_series(series: pd.Series, method, encoding: str = None, *extra) -> pd.Series:
    """
    Transform every string in a Series.

    Args:
        series: Series of strings; missing values are left as they are
        method: A `stringy.dispatch.Method` member or its string value
        encoding: Encoding for every value. Defaults to the default encoding.
        *extra: Extra arguments for the transformation

    Returns:
        A new Series with the same index

    Raises:
        InvalidArgument: If a value is neither a string nor missing

    Example:
        >>> transform_series(pd.Series(['First Name', None]), 'underscored').tolist()
        ['first_name', None]
    """
    method, transform = _bind(method, encoding, extra)
    logger.debug(f"Applying {method.value} to {len(series)} values")
    return series.map(transform, na_action='ignore')

def rename_columns(frame: pd.DataFrame, method, encoding: str = None, *extra) -> pd.DataFrame:
    """
    Transform the string column labels of a DataFrame.

    Non-string labels (e.g. integer positions) are kept unchanged.

    Args:
        frame: DataFrame to rename
        method: A `stringy.dispatch.Method` member or its string value
        encoding: Encoding for every label. Defaults to the default encoding.
        *extra: Extra arguments for the transformation

    Returns:
        A new DataFrame with renamed columns

    Example:
        >>> frame = pd.DataFrame(columns=['County Name', 'FIPS Code'])
        >>> rename_columns(frame, 'camelize').columns.tolist()
        ['countyName', 'fIPSCode']
    """
    method, transform = _bind(method, encoding, extra)
    columns = {label: transform(label) for label in frame.columns if isinstance(label, str)}
    logger.debug(f"Applying {method.value} to {len(columns)} column labels")
    return frame.rename(columns=columns)
