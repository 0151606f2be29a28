import numpy as np
import pandas as pd
import pytest


@pytest.fixture(scope="module")
def series_df():
    dates = pd.date_range("2020-01-22", periods=30, freq="D")
    return pd.DataFrame(
        {"Confirmed": np.arange(1, 31) ** 2, "Fatal": np.arange(0, 30)}, index=pd.Index(dates, name="Date"))


@pytest.fixture(scope="module")
def ranked_df(series_df):
    df = pd.DataFrame({
        "Canada": series_df["Fatal"] * 3.0,
        "Japan": series_df["Fatal"] * 2.0,
        "US": series_df["Fatal"] * 1.0,
    })
    # The last value is not available
    df.iloc[-1, 2] = np.nan
    return df
