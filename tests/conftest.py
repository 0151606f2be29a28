import warnings

warnings.simplefilter("ignore", FutureWarning)
import geopandas as gpd
import numpy as np
import pandas as pd
import pytest
from shapely.geometry import box
from covpercapita import DataEngineer


DATES = ["1/22/20", "1/23/20", "1/24/20"]


@pytest.fixture(scope="function")
def imgfile(tmp_path):
    filepath = tmp_path.joinpath("test.jpg")
    yield str(filepath)
    filepath.unlink(missing_ok=True)


def _wide(records, dates=DATES):
    rows = [[province, country, 0.0, 0.0, *values] for (province, country, values) in records]
    return pd.DataFrame(rows, columns=["Province/State", "Country/Region", "Lat", "Long", *dates])


@pytest.fixture(scope="session")
def cases_wide():
    return _wide([
        (np.nan, "Japan", [2, 3, 5]),
        ("Alberta", "Canada", [1, 2, 4]),
        ("Ontario", "Canada", [3, 5, 8]),
        (np.nan, "US", [10, 20, 40]),
        (np.nan, "Korea, South", [1, 1, 2]),
    ])


@pytest.fixture(scope="session")
def deaths_wide():
    # Korea has no records of deaths and Zeta has no records of cases
    return _wide([
        (np.nan, "Japan", [0, 1, 1]),
        ("Alberta", "Canada", [0, 0, 1]),
        ("Ontario", "Canada", [0, 1, 1]),
        (np.nan, "US", [1, 2, 3]),
        (np.nan, "Zeta", [0, 0, 0]),
    ])


@pytest.fixture(scope="session")
def lookup_df():
    rows = [
        (392, np.nan, "Japan", "Japan", 1000),
        (124, np.nan, "Canada", "Canada", 300),
        (12401, "Alberta", "Canada", "Alberta, Canada", 100),
        (12402, "Ontario", "Canada", "Ontario, Canada", 200),
        (840, np.nan, "US", "US", 5000),
        (84036, "New York", "US", "New York, US", 2000),
        (410, np.nan, "Korea, South", "Korea, South", 500),
    ]
    return pd.DataFrame(rows, columns=["UID", "Province_State", "Country_Region", "Combined_Key", "Population"])


def _us_wide(records, population):
    columns = ["UID", "iso2", "iso3", "code3", "FIPS", "Admin2", "Province_State", "Country_Region", "Lat", "Long_", "Combined_Key"]
    rows = []
    for (i, (county, state, values)) in enumerate(records):
        info = [84000000 + i, "US", "USA", 840, float(i), county, state, "US", 0.0, 0.0, f"{county}, {state}, US"]
        rows.append([*info, *([population[i]] if population else []), *values])
    return pd.DataFrame(rows, columns=[*columns, *(["Population"] if population else []), *DATES[:2]])


@pytest.fixture(scope="session")
def us_cases_wide():
    return _us_wide([("Albany", "New York", [1, 2]), ("Kings", "New York", [3, 4]), ("Autauga", "Alabama", [0, 1])], population=None)


@pytest.fixture(scope="session")
def us_deaths_wide():
    return _us_wide([("Albany", "New York", [0, 1]), ("Kings", "New York", [1, 1]), ("Autauga", "Alabama", [0, 0])], population=[300, 700, 50])


@pytest.fixture(scope="function")
def engineer(cases_wide, deaths_wide, lookup_df):
    return DataEngineer().register(cases_wide, deaths_wide, lookup_df)


@pytest.fixture(scope="function")
def us_engineer(us_cases_wide, us_deaths_wide):
    return DataEngineer().register_us(us_cases_wide, us_deaths_wide)


@pytest.fixture(scope="session")
def geometry():
    names = ["Canada", "Japan", "United States of America", "South Korea", "France"]
    polygons = [box(i * 10, 0, i * 10 + 8, 8) for i in range(len(names))]
    return gpd.GeoDataFrame({"NAME": names, "POP_EST": [1] * len(names), "geometry": polygons}, geometry="geometry")
