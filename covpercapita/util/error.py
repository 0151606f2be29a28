#!/usr/bin/env python
# -*- coding: utf-8 -*-

from covpercapita.util.config import config


class _BaseException(Exception):
    """Base class of the exceptions of covpercapita, logging itself with ERROR level when created.

    Args:
        message (str): what went wrong
        details (str or None): hint to fix the problem
        log (str): short summary written to the log
    """

    def __init__(self, message, details=None, log="exception raised"):
        config.error(log)
        self._message = str(message)
        self._details = details

    def __str__(self):
        if self._details is None:
            return f"{self._message}."
        return f"{self._message}. {self._details}."


class _ValidationError(_BaseException):
    """Base class of the exceptions raised when an argument or a dataset is not acceptable.

    Args:
        name (str): name of the argument or the dataset
        message (str): what went wrong
        details (str or None): hint to fix the problem
    """

    def __init__(self, name, message, details=None):
        super().__init__(message=message, details=details, log=f"{name} was not accepted")


class NotIncludedError(_ValidationError):
    """A required column (or key) is missing, like "Population" of the US deaths table.

    Args:
        key_name (str): name of the missing column/key
        container_name (str): name of the dataset/container
        details (str or None): hint to fix the problem
    """

    def __init__(self, key_name, container_name, details=None):
        super().__init__(
            name=container_name, message=f"'{key_name}' was not included in the {container_name}", details=details)


class NAFoundError(_ValidationError):
    """NA values were found where complete values are required.

    Args:
        name (str): name of the target
        value (object or None): the target, shown in the message when not None
        details (str or None): hint to fix the problem
    """

    def __init__(self, name, value=None, details=None):
        value_str = "" if value is None else f": {value}"
        super().__init__(name=name, message=f"'{name}' has NA values{value_str}", details=details)


class NotEnoughDataError(_ValidationError):
    """The number of records is too small for the analysis, like regression with one country.

    Args:
        name (str): name of the dataset
        value (pandas.DataFrame or list): the dataset
        required_n (int): required number of records
        details (str or None): hint to fix the problem
    """

    def __init__(self, name, value, required_n, details=None):
        message = f"We need {required_n} or more records, but '{name}' has only {len(value)} records"
        super().__init__(name=name, message=message, details=details)


class UnExpectedNoneError(_ValidationError):
    """None was applied where a value is required.

    Args:
        name (str): name of the argument
        details (str or None): hint to fix the problem
    """

    def __init__(self, name, details=None):
        super().__init__(name=name, message=f"'{name}' must not be None", details=details)


class UnExecutedError(_BaseException):
    """A method was called before its prerequisite, like DataEngineer.all() before registration of datasets.

    Args:
        name (str): the method to call in advance
        details (str or None): hint to fix the problem
    """

    def __init__(self, name, details=None):
        super().__init__(message=f"Please execute {name} in advance", details=details, log=f"{name} has not been executed")


class UnExpectedTypeError(_ValidationError):
    """The type of an argument is not acceptable.

    Args:
        name (str): name of the argument
        target (object): the argument
        expected (type or tuple(type)): acceptable type(s)
        details (str or None): hint to fix the problem
    """

    def __init__(self, name, target, expected, details=None):
        message = f"'{name}' must be {expected}, but {type(target)} was applied"
        super().__init__(name=name, message=message, details=details)


class EmptyError(_ValidationError):
    """A dataset (or a selection of it) has no records.

    Args:
        name (str): name of the dataset
        details (str or None): hint to fix the problem
    """

    def __init__(self, name, details=None):
        super().__init__(name=name, message=f"No records were found in {name}", details=details)


class UnExpectedValueRangeError(_ValidationError):
    """A value is out of its range, like a negative number of countries to rank.

    Args:
        name (str): name of the argument
        target (int or float): the value
        value_range (tuple(int or float or None, int or float or None)): minimum and maximum, None means unlimited
        details (str or None): hint to fix the problem
    """

    def __init__(self, name, target, value_range, details=None):
        _min = "-inf" if value_range[0] is None else value_range[0]
        _max = "inf" if value_range[1] is None else value_range[1]
        message = f"'{name}' must be in the range [{_min}, {_max}], but {target} was applied"
        super().__init__(name=name, message=message, details=details)


class UnExpectedValueError(_ValidationError):
    """A value is not one of the candidates, like population_method="mean".

    Args:
        name (str): name of the argument
        value (object): the value
        candidates (list[object]): acceptable values
        details (str or None): hint to fix the problem
    """

    def __init__(self, name, value, candidates, details=None):
        c_str = ", ".join(str(candidate) for candidate in candidates)
        super().__init__(name=name, message=f"'{name}' must be one of [{c_str}], but {value} was applied", details=details)


class SubsetNotFoundError(_BaseException):
    """No records were found for the selected location/date.

    Args:
        country (str or None): country name or None (all countries)
        province (str or None): province/state name or None (country level)
        date (str or pandas.Timestamp or None): the date or None (all dates)
        details (str or None): hint to fix the problem
    """

    def __init__(self, country=None, province=None, date=None, details=None):
        if country is None:
            area = "the world"
        else:
            area = country if province is None else f"{province}/{country}"
        date_str = "" if date is None else f" on {date}"
        super().__init__(message=f"No records in {area}{date_str} were found", details=details, log="subsetting failed")
