#!/usr/bin/env python
# -*- coding: utf-8 -*-

import pandas as pd
from covpercapita.util.error import NotIncludedError, UnExpectedTypeError, EmptyError, UnExpectedNoneError
from covpercapita.util.error import UnExpectedValueRangeError, UnExpectedValueError


class Validator(object):
    """Check arguments and datasets given by users, converting them to the types covpercapita uses.

    Args:
        target (object): the argument or dataset to check
        name (str): name of @target used in error messages
        accept_none (bool): whether None is acceptable as @target or not

    Raises:
        UnExpectedNoneError: @target is None when @accept_none is False

    Note:
        When @target is None, most methods return their default values.

    Examples:
        >>> Validator(10, "top_n").int(value_range=(1, None))
        10
        >>> Validator(None, "date").date(default="2020-03-01")
        Timestamp('2020-03-01 00:00:00')
    """

    def __init__(self, target, name="target", accept_none=True):
        if target is None and not accept_none:
            raise UnExpectedNoneError(name)
        self._target = target
        self._name = str(name)

    @staticmethod
    def _in_range(value, value_range):
        """Return whether the value is in [min, max], None means unlimited.
        """
        lower, upper = value_range
        return (lower is None or value >= lower) and (upper is None or value <= upper)

    def _default(self, default, method, **kwargs):
        """Check the default value with the method when the target is None.
        """
        if default is None:
            return None
        return getattr(Validator(default, name=f"default value of {self._name}"), method)(**kwargs)

    def instance(self, expected):
        """Return the target as-is when it is an instance of the class(es).

        Args:
            expected (type or tuple(type)): acceptable class(es)

        Raises:
            UnExpectedTypeError: the target is not an instance of @expected
        """
        if not isinstance(self._target, expected):
            raise UnExpectedTypeError(self._name, self._target, expected)
        return self._target

    def dataframe(self, columns=None, empty_ok=True):
        """Return a copy of the dataframe after checking its columns.

        Args:
            columns (list[str] or None): columns the dataframe must have or None (not checked)
            empty_ok (bool): whether an empty dataframe is acceptable or not

        Raises:
            UnExpectedTypeError: the target is not a dataframe
            EmptyError: the dataframe is empty when @empty_ok is False
            NotIncludedError: some of @columns are missing (the first missing column is reported)

        Returns:
            pandas.DataFrame: a copy of the target
        """
        df = self.instance(pd.DataFrame).copy()
        if df.empty and not empty_ok:
            raise EmptyError(name=self._name)
        missing = [col for col in (columns or []) if col not in df]
        if missing:
            raise NotIncludedError(
                missing[0], f"columns of {self._name}",
                details=f"The dataframe has {', '.join(map(str, df.columns))} as columns")
        return df

    def int(self, value_range=(0, None), default=None):
        """Return the target as an integer.

        Args:
            value_range (tuple(int or None, int or None)): minimum and maximum, None means unlimited
            default (int or None): value to return when the target is None

        Raises:
            UnExpectedTypeError: the target cannot be converted to an integer without round-off error, like 2.5
            UnExpectedValueRangeError: the value is out of @value_range
        """
        if self._target is None:
            return self._default(default, "int", value_range=value_range)
        try:
            value = int(self._target)
        except (ValueError, TypeError):
            raise UnExpectedTypeError(self._name, self._target, int) from None
        if value != self._target:
            raise UnExpectedTypeError(self._name, self._target, int, details="Round-off error is not accepted")
        if not self._in_range(value, value_range):
            raise UnExpectedValueRangeError(self._name, value, value_range)
        return value

    def float(self, value_range=(0, None), default=None):
        """Return the target as a float.

        Args:
            value_range (tuple(float or None, float or None)): minimum and maximum, None means unlimited
            default (float or None): value to return when the target is None

        Raises:
            UnExpectedTypeError: the target cannot be converted to a float
            UnExpectedValueRangeError: the value is out of @value_range
        """
        if self._target is None:
            return self._default(default, "float", value_range=value_range)
        try:
            value = float(self._target)
        except (ValueError, TypeError):
            raise UnExpectedTypeError(self._name, self._target, float) from None
        if not self._in_range(value, value_range):
            raise UnExpectedValueRangeError(self._name, value, value_range)
        return value

    def date(self, default=None):
        """Return the target as a date (pandas.Timestamp at midnight).

        Args:
            default (str or pandas.Timestamp or None): value to return when the target is None

        Raises:
            UnExpectedTypeError: the target cannot be parsed as a date
        """
        if self._target is None:
            return self._default(default, "date")
        try:
            return pd.to_datetime(self._target).normalize()
        except (ValueError, TypeError):
            raise UnExpectedTypeError(self._name, self._target, pd.Timestamp) from None

    def sequence(self, default=None, unique=False, candidates=None):
        """Return the target (list or tuple) as a list.

        Args:
            default (list[object] or None): value to return when the target is None
            unique (bool): whether remove duplicates keeping the first ones or not
            candidates (list[object] or None): acceptable elements or None (all elements are acceptable)

        Raises:
            UnExpectedTypeError: the target is not a list or a tuple
            UnExpectedValueError: an element is not included in @candidates
        """
        if self._target is None:
            return self._default(default, "sequence", unique=unique, candidates=candidates)
        if not isinstance(self._target, (list, tuple)):
            raise UnExpectedTypeError(self._name, self._target, list, details="A tuple can be used as well")
        elements = list(dict.fromkeys(self._target)) if unique else list(self._target)
        for element in elements:
            if candidates is not None and element not in candidates:
                raise UnExpectedValueError(self._name, element, candidates)
        return elements

    def candidate(self, candidates):
        """Return the target as-is when it is one of the candidates.

        Args:
            candidates (list[object] or tuple(object)): acceptable values

        Raises:
            UnExpectedValueError: the target is not included in @candidates
        """
        if self._target not in candidates:
            raise UnExpectedValueError(self._name, self._target, candidates)
        return self._target

    def dict(self, default=None):
        """Return a new dictionary of the default values updated with the target.

        Args:
            default (dict[str, object] or None): default key-value pairs

        Raises:
            UnExpectedTypeError: the target is neither None nor a dictionary
        """
        if self._target is not None:
            self.instance(dict)
        return {**(default or {}), **(self._target or {})}
