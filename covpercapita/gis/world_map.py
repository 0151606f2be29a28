from __future__ import annotations
import geopandas as gpd
import pandas as pd
from covpercapita.util.config import config
from covpercapita.util.error import EmptyError
from covpercapita.util.validator import Validator
from covpercapita.util.term import Term
from covpercapita.gis._geometry import _Geometry
from covpercapita.gis._choropleth import _ChoroplethMap


class WorldMap(Term):
    """Class to create choropleth maps of countries with country names of JHU CSSE datasets.

    Args:
        name_dict: dictionary to convert country names (JHU CSSE) to those of the geometry (Natural Earth) or None (WorldMap.NAME_DICT)
        geometry: country geometry with NAME and geometry columns or None (download Natural Earth data when required)

    Note:
        Country names which are not included in the geometry after conversion will not be shown.
    """
    NAME_DICT: dict[str, str] = {
        "US": "United States of America",
        "Korea, South": "South Korea",
        "Korea, North": "North Korea",
        "Congo (Kinshasa)": "Dem. Rep. Congo",
        "Congo (Brazzaville)": "Congo",
        "Central African Republic": "Central African Rep.",
        "South Sudan": "S. Sudan",
        "Bosnia and Herzegovina": "Bosnia and Herz.",
        "Dominican Republic": "Dominican Rep.",
        "Equatorial Guinea": "Eq. Guinea",
        "Eswatini": "eSwatini",
        "Solomon Islands": "Solomon Is.",
        "Western Sahara": "W. Sahara",
        "Burma": "Myanmar",
        "Taiwan*": "Taiwan",
        "West Bank and Gaza": "Palestine",
    }

    def __init__(self, name_dict: dict[str, str] | None = None, geometry: gpd.GeoDataFrame | None = None) -> None:
        self._name_dict = self.NAME_DICT.copy() if name_dict is None else Validator(name_dict, "name_dict").dict()
        self._geometry = _Geometry(geometry=geometry)

    def harmonize(self, names: pd.Series) -> pd.Series:
        """Convert country names of JHU CSSE datasets to those of the geometry.

        Args:
            names: country names

        Returns:
            converted names, names not registered in the dictionary will not be changed
        """
        return Validator(names, "names").instance(pd.Series).replace(self._name_dict)

    def to_geopandas(self, data: pd.DataFrame, variable: str, layer: str = "Country") -> gpd.GeoDataFrame:
        """Add geometry information to the data.

        Args:
            data: data with @layer and @variable columns, one record for one country
            variable: column name of the values to show
            layer: column name of country names

        Raises:
            EmptyError: no countries were matched with the geometry

        Returns:
            Index:
                reset index
            Columns:
                - Location (str): country names of the geometry
                - Variable (float): values of @variable or NA (no records)
                - geometry: geometric information

        Note:
            All countries of the geometry are included. Un-matched records of @data will be ignored.
        """
        df = Validator(data, "data").dataframe(columns=[layer, variable], empty_ok=False)
        df = df.loc[:, [layer, variable]].rename(columns={layer: "Location", variable: "Variable"})
        df["Location"] = self.harmonize(df["Location"])
        gdf = self._geometry.geometry().rename(columns={_Geometry.NAME: "Location"})
        unmatched = sorted(set(df["Location"]) - set(gdf["Location"]))
        if unmatched:
            config.debug(f"{len(unmatched)} countries were not shown on the map: {', '.join(map(str, unmatched))}")
        if len(unmatched) == df["Location"].nunique():
            raise EmptyError("countries matched with the geometry")
        df = df.drop_duplicates(subset=["Location"], keep="first")
        merged = gdf.merge(df, how="left", on="Location")
        return gpd.GeoDataFrame(merged.loc[:, ["Location", "Variable", "geometry"]], geometry="geometry")

    def plot(self, data: pd.DataFrame, variable: str, layer: str = "Country", filename: str | None = None,
             title: str | None = None, logscale: bool = False, **kwargs) -> None:
        """Create a choropleth map of the variable.

        Args:
            data: data with @layer and @variable columns, one record for one country
            variable: column name of the values to show
            layer: column name of country names
            filename: filename to save the figure or None (display)
            title: title of the figure or None (@variable)
            logscale: whether convert the value to log10 scale values or not
            kwargs: keyword arguments of matplotlib.pyplot.savefig() and geopandas.GeoDataFrame.plot() except for 'column'
        """
        gdf = self.to_geopandas(data=data, variable=variable, layer=layer)
        savefig_kwargs = Validator(kwargs, "kwargs").dict()
        plot_kwargs = {key: savefig_kwargs.pop(key) for key in list(savefig_kwargs) if key not in ("dpi", "transparent", "facecolor")}
        with _ChoroplethMap(filename=filename, **savefig_kwargs) as cm:
            cm.title = title or variable
            cm.plot(data=gdf, logscale=logscale, label=variable, **plot_kwargs)
