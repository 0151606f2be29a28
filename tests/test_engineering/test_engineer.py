#!/usr/bin/env python
# -*- coding: utf-8 -*-

import pytest
import pandas as pd
from covpercapita import DataEngineer, Term, UnExecutedError, SubsetNotFoundError, UnExpectedValueError


class TestDataEngineer(object):
    def test_unregistered(self):
        engineer = DataEngineer()
        with pytest.raises(UnExecutedError):
            _ = engineer.layer
        with pytest.raises(UnExecutedError):
            engineer.records()
        with pytest.raises(UnExecutedError):
            engineer.all()

    def test_population_method_error(self):
        with pytest.raises(UnExpectedValueError):
            DataEngineer(population_method="mean")

    def test_records(self, engineer):
        df = engineer.records()
        assert engineer.layer == Term.COUNTRY
        assert engineer.citation() == "my own dataset"
        assert df.columns.tolist() == [*Term.KEY_COLUMNS, Term.C, Term.F, Term.N]
        assert df[Term.COUNTRY].nunique() == 5
        assert len(df) == 6 * 3

    def test_all(self, engineer):
        df = engineer.all()
        assert df.columns.tolist() == [Term.COUNTRY, Term.DATE, Term.C, Term.F, Term.N, Term.C_PM, Term.F_PM]
        # Korea (no deaths) and Zeta (no cases and population) are removed
        assert df[Term.COUNTRY].unique().tolist() == ["Canada", "Japan", "US"]
        assert not df.isna().any().any()
        assert (df[[Term.C, Term.F, Term.N]].dtypes == "Int64").all()
        japan = df.loc[df[Term.COUNTRY] == "Japan"].iloc[-1]
        assert japan[Term.C_PM] == pytest.approx(5000)
        assert japan[Term.F_PM] == pytest.approx(1000)

    def test_all_incomplete(self, engineer):
        df = engineer.all(complete=False)
        assert df[Term.COUNTRY].nunique() == 5
        assert df.loc[df[Term.COUNTRY] == "Korea, South", Term.F_PM].isna().all()

    @pytest.mark.parametrize("method, population", [("sum", 600), ("first", 300)])
    def test_population_method(self, cases_wide, deaths_wide, lookup_df, method, population):
        engineer = DataEngineer(population_method=method).register(cases_wide, deaths_wide, lookup_df)
        df = engineer.all()
        canada = df.loc[df[Term.COUNTRY] == "Canada"]
        assert canada[Term.N].unique().tolist() == [population]
        assert canada[Term.F_PM].iloc[-1] == pytest.approx(2 * 1_000_000 / population)

    def test_new(self, engineer):
        df = engineer.all(new=True)
        assert {Term.C_NEW, Term.F_NEW}.issubset(df.columns)
        # The first date of each country is removed
        assert len(df) == 3 * 2
        assert df.loc[df[Term.COUNTRY] == "Japan", Term.C_NEW].tolist() == [1, 2]
        df = engineer.all(complete=False, new=True)
        assert df.loc[df[Term.DATE] == pd.Timestamp("2020-01-22"), Term.C_NEW].isna().all()

    def test_subset(self, engineer):
        df = engineer.subset("Japan")
        assert df.index.name == Term.DATE
        assert Term.COUNTRY not in df
        assert df[Term.C].tolist() == [2, 3, 5]
        with pytest.raises(SubsetNotFoundError):
            engineer.subset("Korea, South")
        assert len(engineer.subset("Korea, South", complete=False)) == 3
        with pytest.raises(SubsetNotFoundError):
            engineer.subset("Atlantis")

    def test_totals(self, engineer):
        df = engineer.totals()
        assert df.columns.tolist() == Term.TOTAL_COLUMNS
        df = df.set_index(Term.COUNTRY)
        assert df.index.tolist() == ["Canada", "Japan", "US"]
        assert df.loc["Canada", Term.C_PT] == pytest.approx(20)
        assert df.loc["US", Term.C_PT] == pytest.approx(8)
        assert df.loc["US", Term.F_PT] == pytest.approx(0.6)

    def test_totals_without_cases(self, cases_wide, deaths_wide, lookup_df):
        c_df = cases_wide.copy()
        c_df.loc[c_df["Country/Region"] == "Japan", ["1/22/20", "1/23/20", "1/24/20"]] = 0
        engineer = DataEngineer().register(c_df, deaths_wide, lookup_df)
        assert "Japan" in engineer.all()[Term.COUNTRY].unique()
        assert "Japan" not in engineer.totals()[Term.COUNTRY].unique()


class TestDataEngineerUS(object):
    def test_records(self, us_engineer):
        df = us_engineer.records()
        assert us_engineer.layer == Term.PROVINCE
        assert Term.CITY in df
        assert df.loc[df[Term.CITY] == "Kings", Term.N].unique().tolist() == [700]

    @pytest.mark.parametrize("method", ["sum", "first"])
    def test_all(self, us_cases_wide, us_deaths_wide, method):
        engineer = DataEngineer(population_method=method).register_us(us_cases_wide, us_deaths_wide)
        df = engineer.all()
        assert df.columns.tolist() == [Term.PROVINCE, Term.DATE, Term.C, Term.F, Term.N, Term.C_PM, Term.F_PM]
        new_york = df.loc[df[Term.PROVINCE] == "New York"]
        # County-level population values are always summed
        assert new_york[Term.N].unique().tolist() == [1000]
        assert new_york[Term.C].tolist() == [4, 6]
        assert new_york[Term.C_PM].iloc[-1] == pytest.approx(6000)

    def test_subset(self, us_engineer):
        assert us_engineer.subset("Alabama")[Term.C].tolist() == [0, 1]
        with pytest.raises(SubsetNotFoundError, match="Ohio/US"):
            us_engineer.subset("Ohio")

    def test_totals(self, us_engineer):
        df = us_engineer.totals().set_index(Term.PROVINCE)
        assert df.index.tolist() == ["Alabama", "New York"]
        assert df.loc["Alabama", Term.C_PT] == pytest.approx(20)
        assert df.loc["New York", Term.F_PT] == pytest.approx(2)
