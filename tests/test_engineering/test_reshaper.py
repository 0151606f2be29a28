#!/usr/bin/env python
# -*- coding: utf-8 -*-

import pytest
import pandas as pd
from covpercapita import wide_to_long, Term, EmptyError, NotIncludedError


class TestWideToLong(object):
    def test_global(self, cases_wide):
        df = wide_to_long(cases_wide, value_name=Term.C, name="cases")
        assert df.columns.tolist() == [Term.COUNTRY, Term.PROVINCE, Term.DATE, Term.C]
        assert len(df) == len(cases_wide) * 3
        assert pd.api.types.is_datetime64_any_dtype(df[Term.DATE])
        assert df[Term.C].dtype == "Int64"
        japan = df.loc[df[Term.COUNTRY] == "Japan"]
        assert japan[Term.PROVINCE].unique().tolist() == [Term.NA]
        assert japan[Term.C].tolist() == [2, 3, 5]
        assert japan[Term.DATE].tolist() == pd.date_range("2020-01-22", "2020-01-24", freq="D").tolist()

    def test_us(self, us_deaths_wide):
        df = wide_to_long(us_deaths_wide, value_name=Term.F, name="deaths (US)")
        assert df.columns.tolist() == [Term.COUNTRY, Term.PROVINCE, Term.CITY, Term.DATE, Term.F]
        assert len(df) == len(us_deaths_wide) * 2
        # Population column is not a date column
        assert Term.N not in df

    def test_no_dates(self, cases_wide):
        with pytest.raises(EmptyError):
            wide_to_long(cases_wide.loc[:, ["Province/State", "Country/Region", "Lat", "Long"]], value_name=Term.C)

    def test_no_country(self, cases_wide):
        with pytest.raises(NotIncludedError):
            wide_to_long(cases_wide.drop(columns=["Country/Region"]), value_name=Term.C)

    def test_without_province(self, cases_wide):
        df = wide_to_long(cases_wide.drop(columns=["Province/State"]), value_name=Term.C)
        assert set(df[Term.PROVINCE]) == {Term.NA}
