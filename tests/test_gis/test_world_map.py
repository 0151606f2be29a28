import geopandas as gpd
import pandas as pd
import pytest
from shapely.geometry import box
from covpercapita import WorldMap, Term, EmptyError, NotIncludedError
from covpercapita.gis._geometry import _Geometry


class TestGeometry(object):
    def test_clean(self):
        gdf = gpd.GeoDataFrame({"name": ["Côte d'Ivoire", None], "geometry": [box(0, 0, 1, 1), box(1, 1, 2, 2)]}, geometry="geometry")
        df = _Geometry(geometry=gdf).geometry()
        assert df.columns.tolist() == [_Geometry.NAME, "geometry"]
        assert df[_Geometry.NAME].tolist() == ["Cote d'Ivoire", Term.NA]

    def test_invalid(self):
        with pytest.raises(NotIncludedError):
            _Geometry(geometry=gpd.GeoDataFrame({"geometry": [box(0, 0, 1, 1)]}, geometry="geometry"))


class TestWorldMap(object):
    def test_harmonize(self):
        names = pd.Series(["US", "Korea, South", "Japan", "Taiwan*"])
        assert WorldMap().harmonize(names).tolist() == ["United States of America", "South Korea", "Japan", "Taiwan"]
        assert WorldMap(name_dict={"Japan": "Nippon"}).harmonize(names).tolist() == ["US", "Korea, South", "Nippon", "Taiwan*"]

    def test_to_geopandas(self, engineer, geometry):
        gdf = WorldMap(geometry=geometry).to_geopandas(engineer.totals(), variable=Term.F_PT, layer=Term.COUNTRY)
        assert isinstance(gdf, gpd.GeoDataFrame)
        assert gdf.columns.tolist() == ["Location", "Variable", "geometry"]
        # All countries of the geometry are included
        assert len(gdf) == len(geometry)
        values = gdf.set_index("Location")["Variable"]
        assert values["United States of America"] == pytest.approx(0.6)
        assert pd.isna(values["France"])
        assert pd.isna(values["South Korea"])

    def test_unmatched(self, geometry):
        data = pd.DataFrame({Term.COUNTRY: ["Atlantis", "Japan"], Term.F_PT: [1.0, 2.0]})
        gdf = WorldMap(geometry=geometry).to_geopandas(data, variable=Term.F_PT)
        assert "Atlantis" not in gdf["Location"].tolist()
        with pytest.raises(EmptyError):
            WorldMap(geometry=geometry).to_geopandas(data.iloc[:1], variable=Term.F_PT)

    @pytest.mark.parametrize("logscale", [False, True])
    def test_plot(self, engineer, geometry, imgfile, logscale):
        WorldMap(geometry=geometry).plot(
            engineer.totals(), variable=Term.F_PT, filename=imgfile, title="Deaths per thousand", logscale=logscale)

    def test_plot_without_missing_values(self, geometry, imgfile):
        data = pd.DataFrame({Term.COUNTRY: geometry["NAME"], Term.C_PT: range(len(geometry))})
        WorldMap(geometry=geometry).plot(data, variable=Term.C_PT, filename=imgfile, cmap="viridis")
