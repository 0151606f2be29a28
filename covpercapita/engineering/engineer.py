from __future__ import annotations
import pandas as pd
from typing_extensions import Self
from covpercapita.util.config import config
from covpercapita.util.error import SubsetNotFoundError, UnExecutedError
from covpercapita.util.stopwatch import StopWatch
from covpercapita.util.validator import Validator
from covpercapita.util.term import Term
from covpercapita.downloading.downloader import DataDownloader
from covpercapita.engineering._reshaper import wide_to_long
from covpercapita.engineering._joiner import _DataJoiner


class DataEngineer(Term):
    """Class for data engineering of JHU-style time-series: reshaping, joining, aggregating, transforming and filtering.

    Args:
        population_method: how to aggregate population values of provinces, "sum" or "first"

    Note:
        With population_method="sum" (default), country-level population values attached to all provinces
        of a country will be summed when aggregated to country level.
        Population of countries with multiple provinces will be over-counted.
        Please use population_method="first" to use the country-level value as-is.

    Note:
        Population values of US states are always summed because the US datasets have county-level population values.
    """

    def __init__(self, population_method: str = "sum") -> None:
        self._population_method = Validator(population_method, "population_method").candidate(_DataJoiner.POPULATION_METHODS)
        self._joiner = _DataJoiner()
        self._layer = None
        self._records = pd.DataFrame()
        self._citation = ""

    def register(self, cases: pd.DataFrame, deaths: pd.DataFrame, lookup: pd.DataFrame, citation: str | None = None) -> Self:
        """Register global datasets (wide format) to analyse countries.

        Args:
            cases: the number of confirmed cases, refer to covpercapita.DataDownloader.global_cases()
            deaths: the number of deaths, refer to covpercapita.DataDownloader.global_deaths()
            lookup: lookup table with population values, refer to covpercapita.DataDownloader.lookup()
            citation: citation of the datasets or None ("my own dataset")

        Returns:
            updated DataEngineer instance
        """
        c_df = wide_to_long(cases, value_name=self.C, name="cases")
        f_df = wide_to_long(deaths, value_name=self.F, name="deaths")
        population = self._joiner.population_lookup(lookup)
        df = self._joiner.combine(c_df, f_df)
        self._records = self._joiner.attach_population(df, population, on=[self.COUNTRY])
        self._layer = self.COUNTRY
        self._citation = citation or "my own dataset"
        config.info(f"Registered {len(self._records)} records of {self._records[self.COUNTRY].nunique()} countries")
        return self

    def register_us(self, cases: pd.DataFrame, deaths: pd.DataFrame, citation: str | None = None) -> Self:
        """Register US datasets (wide format) to analyse US states.

        Args:
            cases: the number of confirmed cases, refer to covpercapita.DataDownloader.us_cases()
            deaths: the number of deaths with Population column, refer to covpercapita.DataDownloader.us_deaths()
            citation: citation of the datasets or None ("my own dataset")

        Returns:
            updated DataEngineer instance
        """
        c_df = wide_to_long(cases, value_name=self.C, name="cases (US)")
        f_df = wide_to_long(deaths, value_name=self.F, name="deaths (US)")
        df = self._joiner.combine(c_df, f_df)
        areas = [col for col in [self.COUNTRY, self.PROVINCE, self.CITY] if col in df]
        population = Validator(deaths, "deaths (US)").dataframe(columns=[self.N]).rename(columns=self.RAW_AREA_DICT)
        population = population.loc[:, [*areas, self.N]].astype(dict.fromkeys(areas, "object"))
        population[areas] = population[areas].fillna(self.NA)
        population = population.drop_duplicates(subset=areas, keep="first")
        self._records = self._joiner.attach_population(df, population, on=areas)
        self._layer = self.PROVINCE
        self._citation = citation or "my own dataset"
        config.info(f"Registered {len(self._records)} records of {self._records[self.PROVINCE].nunique()} states")
        return self

    def download(self, us: bool = False, **kwargs) -> Self:
        """Download datasets from JHU CSSE GitHub repository using covpercapita.DataDownloader and register them.

        Args:
            us: whether analyse US states (True) or countries (False)
            **kwargs: keyword arguments of covpercapita.DataDownloader()

        Returns:
            updated DataEngineer instance
        """
        stopwatch = StopWatch()
        downloader = DataDownloader(**kwargs)
        if us:
            self.register_us(*downloader.us_dataset(), citation=downloader.citation())
        else:
            self.register(*downloader.global_dataset(), citation=downloader.citation())
        config.info(f"Completed downloading and registration in {stopwatch.stop_show()}")
        return self

    @property
    def layer(self) -> str:
        """Column name of the analysed locations, "Country" (global datasets) or "Province" (US datasets).

        Raises:
            UnExecutedError: no datasets have been registered
        """
        if self._layer is None:
            raise UnExecutedError("DataEngineer.register(), .register_us() or .download()")
        return self._layer

    def citation(self) -> str:
        """Return the citation of the registered datasets.
        """
        return self._citation

    def records(self) -> pd.DataFrame:
        """Return the registered records before aggregation.

        Raises:
            UnExecutedError: no datasets have been registered

        Returns:
            A dataframe with reset index and the following columns.

                - Country (object): country names
                - Province (object): province names or "-"
                - City (object): county names or "-" (US datasets only)
                - Date (pandas.Timestamp): observation dates
                - Confirmed (pandas.Int64): the number of confirmed cases or NA
                - Fatal (pandas.Int64): the number of deaths or NA
                - Population (float): population values or NA
        """
        _ = self.layer
        return self._records.copy()

    def all(self, complete: bool = True, new: bool = False) -> pd.DataFrame:
        """Return daily records aggregated to the layer with per-million values.

        Args:
            complete: whether remove records with NA values or not
            new: whether add daily new values (Confirmed_new, Fatal_new) or not

        Raises:
            UnExecutedError: no datasets have been registered

        Returns:
            A dataframe with reset index and the following columns.

                - Country or Province (object): location names
                - Date (pandas.Timestamp): observation dates
                - Confirmed (pandas.Int64 or float): the number of confirmed cases
                - Fatal (pandas.Int64 or float): the number of deaths
                - Population (pandas.Int64 or float): population values
                - Confirmed_per_million (float): confirmed cases per million people
                - Fatal_per_million (float): deaths per million people
                - Confirmed_new (float): daily new confirmed cases, if @new is True
                - Fatal_new (float): daily new deaths, if @new is True

        Note:
            When @complete and @new are True, the records of the first date of each location will be removed
            because daily new values cannot be calculated.
        """
        method = self._population_method if self.layer == self.COUNTRY else "sum"
        df = self._joiner.aggregate(self._records, layer=self._layer, population_method=method)
        df = self._joiner.per_capita(df, scale=self.MILLION)
        if new:
            df = self._joiner.new_values(df, layer=self._layer)
        return self._joiner.complete(df) if complete else df

    def subset(self, name: str, complete: bool = True, new: bool = False) -> pd.DataFrame:
        """Return daily records of the selected location.

        Args:
            name: country name (global datasets) or state name (US datasets)
            complete: whether remove records with NA values or not
            new: whether add daily new values (Confirmed_new, Fatal_new) or not

        Raises:
            SubsetNotFoundError: no records of the location were found

        Returns:
            A dataframe with the same columns as DataEngineer.all() but Date is the index.
        """
        df = self.all(complete=complete, new=new)
        df = df.loc[df[self._layer] == name]
        if df.empty:
            raise SubsetNotFoundError(
                country=name if self._layer == self.COUNTRY else "US",
                province=None if self._layer == self.COUNTRY else name)
        return df.drop(columns=self._layer).set_index(self.DATE)

    def totals(self) -> pd.DataFrame:
        """Return the latest values of all locations with per-thousand values.

        Raises:
            UnExecutedError: no datasets have been registered

        Returns:
            A dataframe with reset index and the following columns.

                - Country or Province (object): location names
                - Confirmed (pandas.Int64): the number of confirmed cases at the last date
                - Fatal (pandas.Int64): the number of deaths at the last date
                - Population (pandas.Int64): population value
                - Confirmed_per_thousand (float): confirmed cases per thousand people
                - Fatal_per_thousand (float): deaths per thousand people

        Note:
            Locations with 0 confirmed cases or 0 population are not included.
        """
        return self._joiner.totals(self.all(complete=True), layer=self.layer)
