from __future__ import annotations
from pathlib import Path
import geopandas as gpd
import pandas as pd
from covpercapita.util.config import config
from covpercapita.util.error import SubsetNotFoundError, UnExpectedValueError
from covpercapita.util.filer import Filer
from covpercapita.util.stopwatch import StopWatch
from covpercapita.util.validator import Validator
from covpercapita.util.term import Term
from covpercapita.engineering.engineer import DataEngineer
from covpercapita.visualization.line_plot import line_plot
from covpercapita.visualization.rank_plot import rank_plot
from covpercapita.gis.world_map import WorldMap
from covpercapita.science.regression import RateRegressor


class Reporter(Term):
    """Class to create figures and summaries of per-capita values of COVID-19 cases.

    Args:
        engineer: data engineer with registered datasets or None (download global datasets)
        country: default location name to show time-series (country name or US state name)
        top_n: default number of locations to rank
        date: default date of ranking or None (the last date of the registered datasets)
        name_dict: dictionary to convert country names for choropleth maps or None (covpercapita.WorldMap.NAME_DICT)
        geometry: country geometry for choropleth maps or None (download Natural Earth data when required)
    """

    def __init__(self, engineer: DataEngineer | None = None, country: str = "US", top_n: int = 10,
                 date: str | pd.Timestamp | None = None, name_dict: dict[str, str] | None = None,
                 geometry: gpd.GeoDataFrame | None = None) -> None:
        self._engineer = DataEngineer().download() if engineer is None else Validator(engineer, "engineer").instance(DataEngineer)
        self._layer = self._engineer.layer
        self._country = str(country)
        self._top_n = Validator(top_n, "top_n").int(value_range=(1, None))
        self._date = Validator(date, "date").date()
        self._name_dict = name_dict
        self._geometry = geometry
        self._df = self._engineer.all(complete=True)

    def last_date(self) -> pd.Timestamp:
        """Return the last date of the registered datasets, before removing records with NA values.
        """
        return self._engineer.records()[self.DATE].max()

    def country_summary(self, country: str | None = None) -> pd.DataFrame:
        """Return descriptive statistics of per-million values of the location.

        Args:
            country: location name or None (default location)

        Raises:
            SubsetNotFoundError: no records of the location were found

        Returns:
            descriptive statistics (pandas.DataFrame.describe()) of Confirmed_per_million and Fatal_per_million
        """
        return self._engineer.subset(country or self._country).loc[:, self.RATE_COLUMNS].describe()

    def country_series(self, country: str | None = None, filename: str | None = None, **kwargs) -> None:
        """Show the cumulative number of confirmed cases and deaths of the location with log-scale y-axis.

        Args:
            country: location name or None (default location)
            filename: filename to save the figure or None (display)
            kwargs: keyword arguments of covpercapita.line_plot()

        Raises:
            SubsetNotFoundError: no records of the location were found
        """
        name = country or self._country
        df = self._engineer.subset(name).loc[:, self.VALUE_COLUMNS]
        plot_kwargs = {"title": f"COVID-19 in {name}", "ylabel": "Cases", "y_logscale": True, **kwargs}
        line_plot(df.astype("float64"), filename=filename, **plot_kwargs)

    def top_countries(self, n: int | None = None, date: str | pd.Timestamp | None = None) -> pd.DataFrame:
        """Return the locations with the largest values of deaths per million on the date.

        Args:
            n: the number of locations or None (default number)
            date: date of ranking or None (default date or the last date of the registered datasets)

        Raises:
            SubsetNotFoundError: no records were found on the date

        Returns:
            Index
                reset index
            Columns
                the same as covpercapita.DataEngineer.all() with @n or less rows

        Note:
            Records with the same values keep the order of the registered data (sorted by location names).
        """
        n = Validator(n, "n").int(value_range=(1, None), default=self._top_n)
        date = Validator(date, "date").date(default=self._date or self.last_date())
        df = self._df.loc[self._df[self.DATE] == date]
        if df.empty:
            raise SubsetNotFoundError(date=date.strftime("%Y-%m-%d"))
        df = df.sort_values(self.F_PM, ascending=False, kind="stable")
        return df.head(n).reset_index(drop=True)

    def top_plot(self, n: int | None = None, date: str | pd.Timestamp | None = None, filename: str | None = None, **kwargs) -> None:
        """Show deaths per million of the top locations for all dates with labels.

        Args:
            n: the number of locations or None (default number)
            date: date of ranking or None (default date or the last date of the registered datasets)
            filename: filename to save the figure or None (display)
            kwargs: keyword arguments of covpercapita.rank_plot()
        """
        names = self.top_countries(n=n, date=date)[self._layer].tolist()
        df = self._df.loc[self._df[self._layer].isin(names)]
        df = df.pivot_table(index=self.DATE, columns=self._layer, values=self.F_PM, aggfunc="last").reindex(columns=names)
        plot_kwargs = {"title": f"Top {len(names)} of deaths per million", "ylabel": "Deaths per million", "math_scale": False, **kwargs}
        rank_plot(df, filename=filename, **plot_kwargs)

    def world_map(self, filename: str | None = None, variable: str = Term.F_PT, **kwargs) -> None:
        """Create a choropleth map of the variable of country totals.

        Args:
            filename: filename to save the figure or None (display)
            variable: variable of covpercapita.DataEngineer.totals() to show
            kwargs: keyword arguments of covpercapita.WorldMap.plot()

        Raises:
            UnExpectedValueError: the registered datasets are not country-level
        """
        if self._layer != self.COUNTRY:
            raise UnExpectedValueError("layer of the registered datasets", self._layer, [self.COUNTRY])
        world_map = WorldMap(name_dict=self._name_dict, geometry=self._geometry)
        world_map.plot(self._engineer.totals(), variable=variable, layer=self.COUNTRY, filename=filename, **kwargs)

    def regression(self) -> RateRegressor:
        """Return linear regression of deaths per thousand with confirmed cases per thousand.
        """
        return RateRegressor(self._engineer.totals(), x=self.C_PT, y=self.F_PT, layer=self._layer)

    def run(self, directory: str | Path = "output", prefix: str | None = None) -> dict[str, object]:
        """Create all figures and return summary values.

        Args:
            directory: directory to save the figures
            prefix: prefix of the filenames or None (no prefix)

        Returns:
            dictionary of the following keys and values.

                - summary (pandas.DataFrame): descriptive statistics of per-million values of the default location
                - top (list[str]): names of the top locations
                - coefficients (dict[str, float]): intercept, slope and r2 of linear regression
                - files (list[str]): filenames of the figures
        """
        stopwatch = StopWatch()
        filer = Filer(directory=directory, prefix=prefix, digits=2)
        self.country_series(**filer.png("series"))
        self.top_plot(**filer.png("top"))
        if self._layer == self.COUNTRY:
            self.world_map(**filer.png("map"))
        regressor = self.regression()
        regressor.plot(**filer.png("regression"))
        config.info(f"Created {len(filer.files())} figures in {stopwatch.stop_show()}")
        return {
            "summary": self.country_summary(),
            "top": self.top_countries()[self._layer].tolist(),
            "coefficients": regressor.coefficients(),
            "files": filer.files(),
        }
