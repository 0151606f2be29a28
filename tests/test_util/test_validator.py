#!/usr/bin/env python
# -*- coding: utf-8 -*-

import pytest
import pandas as pd
from pandas.testing import assert_frame_equal
from covpercapita import Validator, Term, DataEngineer
from covpercapita import NotIncludedError, UnExpectedTypeError, EmptyError, UnExpectedNoneError
from covpercapita import UnExpectedValueRangeError, UnExpectedValueError


class TestValidator(object):
    def test_none(self):
        with pytest.raises(UnExpectedNoneError):
            Validator(None, "target", accept_none=False)

    def test_instance(self):
        v = Validator("covpercapita")
        with pytest.raises(UnExpectedTypeError):
            v.instance(int)
        assert v.instance(str) == "covpercapita"
        engineer = DataEngineer()
        assert Validator(engineer, "engineer").instance(DataEngineer) is engineer

    def test_dataframe(self):
        with pytest.raises(UnExpectedTypeError):
            Validator("string").dataframe()
        with pytest.raises(EmptyError):
            Validator(pd.DataFrame()).dataframe(empty_ok=False)
        df = pd.DataFrame({"A": [1, 2], "B": [3, 4]})
        v = Validator(df, "dataframe")
        with pytest.raises(NotIncludedError, match="'C'"):
            v.dataframe(columns=["A", "C", "D"])
        assert_frame_equal(v.dataframe(), df)
        assert_frame_equal(v.dataframe(columns=["A"]), df)
        # Returns a copy
        v.dataframe()["A"] = 0
        assert df["A"].tolist() == [1, 2]

    def test_float(self):
        assert Validator(None).float(default=1.2) == 1.2
        assert Validator(None).float() is None
        with pytest.raises(UnExpectedTypeError):
            Validator("string").float()
        with pytest.raises(UnExpectedValueRangeError):
            Validator(1.2).float(value_range=(0, 1.1))
        with pytest.raises(UnExpectedValueRangeError):
            Validator(1.2).float(value_range=(1.5, 2))
        assert Validator(1.2).float() == 1.2
        assert Validator(0).float(value_range=(0, None)) == 0

    def test_int(self):
        assert Validator(None).int(default=2) == 2
        with pytest.raises(UnExpectedTypeError):
            Validator("string").int()
        with pytest.raises(UnExpectedTypeError):
            Validator(1.2).int()
        with pytest.raises(UnExpectedValueRangeError):
            Validator(2).int(value_range=(0, 1))
        with pytest.raises(UnExpectedValueRangeError):
            Validator(2).int(value_range=(3, 4))
        with pytest.raises(UnExpectedValueRangeError):
            Validator(0).int(value_range=(1, None))
        assert Validator(2.0).int() == 2
        assert Validator(0).int(value_range=(0, None)) == 0

    def test_date(self):
        assert Validator(None).date() is None
        assert Validator(None).date(default="2020-01-22") == pd.Timestamp("2020-01-22")
        assert Validator("22Jan2020 12:00").date() == pd.Timestamp("2020-01-22")
        with pytest.raises(UnExpectedTypeError):
            Validator("not a date").date()

    def test_sequence(self):
        assert Validator(None).sequence(default=["A"]) == ["A"]
        assert Validator(("A", "B")).sequence() == ["A", "B"]
        assert Validator(["B", "A", "B"]).sequence(unique=True) == ["B", "A"]
        with pytest.raises(UnExpectedTypeError):
            Validator("A").sequence()
        with pytest.raises(UnExpectedValueError):
            Validator(["A", "C"]).sequence(candidates=["A", "B"])

    def test_candidate(self):
        assert Validator("sum").candidate(["sum", "first"]) == "sum"
        with pytest.raises(UnExpectedValueError):
            Validator("mean").candidate(["sum", "first"])

    def test_dict(self):
        assert Validator(None).dict(default={"a": 1}) == {"a": 1}
        assert Validator({"a": 2, "b": 3}).dict(default={"a": 1}) == {"a": 2, "b": 3}
        with pytest.raises(UnExpectedTypeError):
            Validator(["a"]).dict()


class TestTerm(object):
    @pytest.mark.parametrize(
        "variable, scale, expected",
        [
            (Term.C, Term.MILLION, "Confirmed_per_million"),
            (Term.F, Term.THOUSAND, "Fatal_per_thousand"),
        ]
    )
    def test_per_capita_name(self, variable, scale, expected):
        assert Term.per_capita_name(variable, scale) == expected

    def test_per_capita_name_error(self):
        with pytest.raises(UnExpectedValueError):
            Term.per_capita_name(Term.C, 100)
