from __future__ import annotations
import pandas as pd
from covpercapita.util.validator import Validator
from covpercapita.util.term import Term
from covpercapita.downloading._provider import _DataProvider


class DataDownloader(Term):
    """Class to download COVID-19 time-series and population data from JHU CSSE GitHub repository.

    Args:
        base_url: URL of "csse_covid_19_data" directory of the repository
        user_agent: value of User-Agent header

    Note:
        Files will not be saved locally. Each method downloads the file again.

    Note:
        Refer to https://github.com/CSSEGISandData/COVID-19
    """
    BASE_URL: str = "https://raw.githubusercontent.com/CSSEGISandData/COVID-19/master/csse_covid_19_data"
    # Path of time-series files from the base URL
    TIME_SERIES: str = "csse_covid_19_time_series/time_series_covid19_{variable}_{area}.csv"
    LOOKUP: str = "UID_ISO_FIPS_LookUp_Table.csv"
    # Columns the raw datasets must have
    GLOBAL_COLUMNS: list[str] = ["Province/State", "Country/Region"]
    US_COLUMNS: list[str] = ["Admin2", "Province_State", "Country_Region", "Combined_Key"]
    LOOKUP_COLUMNS: list[str] = ["Province_State", "Country_Region", "Combined_Key", "Population"]
    CITATION: str = "COVID-19 Data Repository by the Center for Systems Science and Engineering (CSSE) at Johns Hopkins University"

    def __init__(self, base_url: str | None = None, user_agent: str = "Mozilla/5.0") -> None:
        self._base_url = str(base_url or self.BASE_URL).rstrip("/")
        self._provider = _DataProvider(user_agent=user_agent)

    def _url(self, path: str) -> str:
        return f"{self._base_url}/{path}"

    def _time_series(self, variable: str, area: str) -> pd.DataFrame:
        """Download a time-series file.

        Args:
            variable: "confirmed" or "deaths"
            area: "global" or "US"

        Returns:
            raw data with one column per date
        """
        Validator(variable, "variable").candidate(["confirmed", "deaths"])
        area = Validator(area, "area").candidate(["global", "US"])
        url = self._url(self.TIME_SERIES.format(variable=variable, area=area))
        columns = self.GLOBAL_COLUMNS if area == "global" else self.US_COLUMNS
        return self._provider.provide(url, columns=columns, title=f"{variable} ({area})")

    def global_cases(self) -> pd.DataFrame:
        """Return the number of confirmed cases of countries/provinces (wide format).

        Returns:
            A dataframe with reset index and the following columns.

                - Province/State (object): province names or NA
                - Country/Region (object): country names
                - Lat, Long (float): coordinates
                - columns named with dates, like 1/22/20 (int): cumulative number of confirmed cases
        """
        return self._time_series(variable="confirmed", area="global")

    def global_deaths(self) -> pd.DataFrame:
        """Return the number of deaths of countries/provinces (wide format).

        Returns:
            A dataframe with the same columns as DataDownloader.global_cases().
        """
        return self._time_series(variable="deaths", area="global")

    def us_cases(self) -> pd.DataFrame:
        """Return the number of confirmed cases of US counties (wide format).

        Returns:
            A dataframe with reset index and the following columns.

                - UID, iso2, iso3, code3, FIPS: identifiers
                - Admin2 (object): county names
                - Province_State (object): state names
                - Country_Region (object): "US"
                - Lat, Long_ (float): coordinates
                - Combined_Key (object): like "Autauga, Alabama, US"
                - columns named with dates, like 1/22/20 (int): cumulative number of confirmed cases
        """
        return self._time_series(variable="confirmed", area="US")

    def us_deaths(self) -> pd.DataFrame:
        """Return the number of deaths of US counties (wide format).

        Returns:
            A dataframe with the same columns as DataDownloader.us_cases() and Population (int) column.
        """
        df = self._time_series(variable="deaths", area="US")
        return Validator(df, "deaths cases (US)").dataframe(columns=[self.N])

    def lookup(self) -> pd.DataFrame:
        """Return the lookup table of locations with population values.

        Returns:
            A dataframe with reset index and the following columns.

                - UID, iso2, iso3, code3, FIPS: identifiers
                - Admin2 (object): county names or NA
                - Province_State (object): province names or NA
                - Country_Region (object): country names
                - Lat, Long_ (float): coordinates
                - Combined_Key (object): like "Tokyo, Japan"
                - Population (float): population values or NA

        Note:
            Country-level records are placed before province-level records of the country.
        """
        return self._provider.provide(self._url(self.LOOKUP), columns=self.LOOKUP_COLUMNS, title="lookup table")

    def global_dataset(self) -> tuple[pd.DataFrame, pd.DataFrame, pd.DataFrame]:
        """Return the datasets used for analysis of the world.

        Returns:
            tuple(pandas.DataFrame, pandas.DataFrame, pandas.DataFrame): confirmed cases, deaths and lookup table
        """
        return (self.global_cases(), self.global_deaths(), self.lookup())

    def us_dataset(self) -> tuple[pd.DataFrame, pd.DataFrame]:
        """Return the datasets used for analysis of US states.

        Returns:
            tuple(pandas.DataFrame, pandas.DataFrame): confirmed cases and deaths (with population values)
        """
        return (self.us_cases(), self.us_deaths())

    def citation(self) -> str:
        """Return citation of the data source.
        """
        return self.CITATION
