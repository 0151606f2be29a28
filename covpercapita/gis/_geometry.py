#!/usr/bin/env python
# -*- coding: utf-8 -*-

import warnings
import geopandas as gpd
from unidecode import unidecode
from covpercapita.util.config import config
from covpercapita.util.validator import Validator
from covpercapita.util.term import Term


class _Geometry(Term):
    """Class to provide country geometry of "Natural Earth".

    Args:
        title (str): title of GeoJSON file (without extension) of "Natural Earth" GitHub repository
        geometry (geopandas.GeoDataFrame or None): geometry to use instead of downloading
            Index
                reset index
            Columns
                - NAME or name (str): country names
                - geometry: geometric information

    Note:
        GeoJSON files are listed in https://github.com/nvkelso/natural-earth-vector/tree/master/geojson
        Natural Earth (Free vector and raster map data at naturalearthdata.com, Public Domain)
    """
    URL = "https://raw.githubusercontent.com/nvkelso/natural-earth-vector/master/geojson/{title}.geojson"
    NAME = "NAME"

    def __init__(self, title="ne_110m_admin_0_countries", geometry=None):
        self._title = str(title)
        self._gdf = None if geometry is None else self._clean(Validator(geometry, "geometry").instance(gpd.GeoDataFrame))

    def _clean(self, gdf):
        """Select name and geometry columns, transliterating the names.

        Args:
            gdf (geopandas.GeoDataFrame): raw data

        Returns:
            geopandas.GeoDataFrame:
                Index
                    reset index
                Columns
                    - NAME (str): country names
                    - geometry: geometric information
        """
        name_col = self.NAME if self.NAME in gdf else "name"
        gdf = Validator(gdf, "geometry").dataframe(columns=[name_col, "geometry"])
        gdf = gdf.loc[:, [name_col, "geometry"]].rename(columns={name_col: self.NAME})
        gdf[self.NAME] = gdf[self.NAME].fillna(self.NA).astype(str).apply(unidecode)
        return gpd.GeoDataFrame(gdf, geometry="geometry").reset_index(drop=True)

    def geometry(self):
        """Return the geometry, downloading the GeoJSON file at the first call.

        Returns:
            geopandas.GeoDataFrame: refer to _Geometry._clean()
        """
        if self._gdf is None:
            warnings.filterwarnings("ignore", category=DeprecationWarning)
            config.info("Retrieving GIS data from Natural Earth https://www.naturalearthdata.com/")
            self._gdf = self._clean(gpd.read_file(self.URL.format(title=self._title)))
        return self._gdf.copy()
