#!/usr/bin/env python
# -*- coding: utf-8 -*-

import warnings
import geopandas as gpd
import numpy as np
from mpl_toolkits.axes_grid1 import make_axes_locatable
from covpercapita.util.validator import Validator
from covpercapita.visualization.vbase import VisualizeBase


class _ChoroplethMap(VisualizeBase):
    """Choropleth map of one variable with a horizontal color bar.

    Args:
        filename (str or None): filename to save the figure or None (display it)
        kwargs: the other arguments of matplotlib.pyplot.savefig()
    """
    MISSING_KWDS = {"color": "lightgrey", "edgecolor": "white", "hatch": "///"}

    def plot(self, data, logscale=False, label=None, **kwargs):
        """Paint the areas with the values.

        Args:
            data (geopandas.GeoDataFrame): values and shapes of the areas
                Index
                    reset index
                Columns
                    - Location (str): area names
                    - Variable (float): values or NA (painted as missing values with hatches)
                    - geometry: shapes of the areas
            logscale (bool): whether show log10(value + 1) or not
            label (str or None): label of the color bar
            kwargs: keyword arguments of geopandas.GeoDataFrame.plot() except for "column", "ax" and "cax"
        """
        warnings.filterwarnings("ignore", category=UserWarning)
        df = Validator(data, "data").dataframe(columns=["Location", "Variable", "geometry"])
        gdf = gpd.GeoDataFrame(df, geometry="geometry")
        gdf["Variable"] = gdf["Variable"].astype("float64")
        if logscale:
            gdf["Variable"] = np.log10(gdf["Variable"] + 1)
            label = f"{label or 'values'} in log10 scale"
        self._variables = ["Variable"]
        legend_kwds = {"orientation": "horizontal"}
        if label is not None:
            legend_kwds["label"] = str(label)
        plot_kwargs = {"legend": True, "cmap": "coolwarm", **kwargs, "legend_kwds": legend_kwds}
        if gdf["Variable"].isna().any():
            plot_kwargs.setdefault("missing_kwds", self.MISSING_KWDS)
        cax = make_axes_locatable(self._ax).append_axes("bottom", size="5%", pad=0.1)
        gdf.plot(column="Variable", ax=self._ax, cax=cax, **plot_kwargs)
        self._ax.set_axis_off()
