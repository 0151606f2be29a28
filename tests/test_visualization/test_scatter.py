import pandas as pd
import pytest
from covpercapita import ScatterPlot, scatter_plot, UnExecutedError, NotIncludedError


@pytest.fixture(scope="module")
def xy_df():
    return pd.DataFrame({"x": [20.0, 5.0, 8.0, 12.0], "y": [3.3, 1.0, 0.6, 2.0]})


class TestScatterPlot(object):
    def test_plot(self, xy_df, imgfile):
        with ScatterPlot(filename=imgfile) as sp:
            with pytest.raises(UnExecutedError):
                sp.line_predicted(predicted=xy_df["y"])
            sp.plot(data=xy_df)
            sp.x_axis(xlabel="Confirmed_per_thousand")
            sp.y_axis(ylabel="Fatal_per_thousand")
            sp.line_predicted(predicted=xy_df["x"] * 0.15)
            sp.legend()
        assert len(sp.ax.get_lines()) == 1
        with pytest.raises(NotIncludedError):
            with ScatterPlot(filename=imgfile) as sp:
                sp.plot(data=xy_df.rename(columns={"x": "X"}))

    def test_function(self, xy_df, imgfile):
        scatter_plot(df=xy_df, title="Deaths and cases", filename=imgfile, predicted=xy_df["x"] * 0.15)
        scatter_plot(df=xy_df, filename=imgfile, show_legend=False, xlabel="x", ylim=(0, None))
