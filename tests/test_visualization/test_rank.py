import pytest
from covpercapita import RankPlot, rank_plot, UnExecutedError


class TestRankPlot(object):
    def test_label(self, ranked_df, imgfile):
        with RankPlot(filename=imgfile) as rp:
            with pytest.raises(UnExecutedError):
                rp.label()
            rp.plot(data=ranked_df)
            rp.label(fontsize=8)
        labels = [text.get_text() for text in rp.ax.texts]
        assert labels == ranked_df.columns.tolist()

    def test_function(self, ranked_df, imgfile):
        rank_plot(df=ranked_df, title="Deaths per million", filename=imgfile, ylabel="Deaths per million", math_scale=False)
        rank_plot(df=ranked_df, filename=imgfile, show_legend=True, offset=(5, 0))
