#!/usr/bin/env python
# -*- coding: utf-8 -*-

import pandas as pd
from covpercapita.util.config import config
from covpercapita.util.error import EmptyError
from covpercapita.util.validator import Validator
from covpercapita.util.term import Term


class _Reshaper(Term):
    """Class to convert wide JHU-style time-series (one column per date) to long format.

    Args:
        data (pandas.DataFrame): raw data
            Index
                reset index
            Columns
                - Province/State or Province_State (object): province names or NA (optional)
                - Country/Region or Country_Region (object): country names
                - Admin2 (object): county names (optional, US datasets)
                - columns named with dates, like 1/22/20 (int): cumulative values
                - the other columns (Lat, Long, UID, Population,...) will be ignored
        name (str): name of the data used in log messages
    """

    def __init__(self, data, name="data"):
        self._name = str(name)
        df = Validator(data, self._name).dataframe().rename(columns=self.RAW_AREA_DICT)
        self._df = Validator(df, self._name).dataframe(columns=[self.COUNTRY])
        if self.PROVINCE not in self._df:
            self._df[self.PROVINCE] = self.NA

    def id_columns(self):
        """Return the names of location columns.

        Returns:
            list[str]: Country, Province and City (when available)
        """
        return [*self.AREA_COLUMNS, *([self.CITY] if self.CITY in self._df else [])]

    def date_columns(self):
        """Return the names of date columns with the original order.

        Returns:
            list[str]: column names which can be parsed with Term.RAW_DATE_FORMAT
        """
        dates = pd.to_datetime(pd.Series(self._df.columns.astype(str)), format=self.RAW_DATE_FORMAT, errors="coerce")
        return self._df.columns[dates.notna().to_numpy()].tolist()

    def long(self, value_name):
        """Return long-format data.

        Args:
            value_name (str): column name of the values, like Confirmed

        Raises:
            EmptyError: the data has no date columns

        Returns:
            pandas.DataFrame:
                Index
                    reset index
                Columns
                    - Country (object): country names
                    - Province (object): province names or "-"
                    - City (object): city names or "-" (only when the raw data has Admin2 column)
                    - Date (pandas.Timestamp): observation dates
                    - (pandas.Int64): column named with @value_name

        Note:
            The number of rows is the number of rows of the raw data multiplied by the number of date columns.
        """
        date_cols = self.date_columns()
        if not date_cols:
            raise EmptyError(f"date columns of {self._name}", details=f"Names of date columns must be like {self.RAW_DATE_FORMAT}")
        id_cols = self.id_columns()
        df = self._df.loc[:, [*id_cols, *date_cols]].copy()
        df[id_cols] = df[id_cols].astype("object").fillna(self.NA)
        df = df.melt(id_vars=id_cols, value_vars=date_cols, var_name=self.DATE, value_name=value_name)
        df[self.DATE] = pd.to_datetime(df[self.DATE], format=self.RAW_DATE_FORMAT)
        df[value_name] = pd.to_numeric(df[value_name]).astype("Int64")
        config.debug(f"{self._name}: {len(self._df)} locations x {len(date_cols)} dates were converted to {len(df)} records")
        return df.loc[:, [*id_cols, self.DATE, value_name]]


def wide_to_long(data, value_name, name="data"):
    """Convert wide JHU-style time-series to long-format data.

    Args:
        data (pandas.DataFrame): raw data with one column per date, refer to covpercapita.engineering._reshaper._Reshaper
        value_name (str): column name of the values, like Confirmed
        name (str): name of the data used in log messages and errors

    Returns:
        pandas.DataFrame: refer to covpercapita.engineering._reshaper._Reshaper.long()
    """
    return _Reshaper(data=data, name=name).long(value_name=value_name)
