#!/usr/bin/env python
# -*- coding: utf-8 -*-

from matplotlib import pyplot as plt
import numpy as np
import pandas as pd
from covpercapita.util.error import UnExecutedError
from covpercapita.visualization.vbase import find_args
from covpercapita.visualization.line_plot import LinePlot


class RankPlot(LinePlot):
    """Create a line plot of ranked locations with labels at the end of the lines.

    Args:
        filename (str or None): filename to save the figure or None (display)
        bbox_inches (str): bounding box in inches when creating the figure
        kwargs: the other arguments of matplotlib.pyplot.savefig()
    """

    def __init__(self, filename=None, bbox_inches="tight", **kwargs):
        super().__init__(filename=filename, bbox_inches=bbox_inches, **kwargs)
        self._data = pd.DataFrame()

    def plot(self, data, colormap="tab10", color_dict=None, **kwargs):
        """Plot chronological change of the values of the locations.

        Args:
            data (pandas.DataFrame): data to show
                Index
                    Date (pandas.Timestamp): observation dates
                Columns
                    location names with the order of ranking
            colormap (str, matplotlib colormap object or None): colormap, please refer to https://matplotlib.org/examples/color/colormaps_reference.html
            color_dict (dict[str, str] or None): dictionary of column names (keys) and colors (values)
            kwargs: keyword arguments of pandas.DataFrame.plot()
        """
        kwargs.setdefault("x_compat", True)
        super().plot(data=data, colormap=colormap, color_dict=color_dict, **kwargs)
        self._data = pd.DataFrame(data)

    def label(self, fontsize=9, offset=(3, 0)):
        """Show location names at the last available point of each line.

        Args:
            fontsize (int or float): font size of the labels
            offset (tuple(int or float, int or float)): offset of the labels from the points [points]

        Raises:
            UnExecutedError: RankPlot.plot() has not been called
        """
        if self._data.empty:
            raise UnExecutedError("RankPlot.plot()")
        names = {str(name) for name in self._data.columns}
        for line in [line for line in self._ax.get_lines() if line.get_label() in names]:
            x_values, y_values = np.asarray(line.get_xdata()), np.asarray(line.get_ydata(), dtype="float64")
            available = np.flatnonzero(~np.isnan(y_values))
            if not available.size:
                continue
            self._ax.annotate(
                line.get_label(), xy=(x_values[available[-1]], y_values[available[-1]]), xytext=offset,
                textcoords="offset points", va="center", fontsize=fontsize, color=line.get_color())


def rank_plot(df, title=None, filename=None, show_legend=False, **kwargs):
    """Wrapper function: show chronological change of the values of the ranked locations with labels.

    Args:
        df (pandas.DataFrame): data to show
            Index
                Date (pandas.Timestamp)
            Columns
                location names
        title (str): title of the figure
        filename (str or None): filename to save the figure or None (display)
        show_legend (bool): whether show legend or not
        kwargs: keyword arguments of the following classes and methods.
            - covpercapita.RankPlot() and its methods,
            - matplotlib.pyplot.savefig(), matplotlib.pyplot.legend(),
            - pandas.DataFrame.plot()
    """
    with RankPlot(filename=filename, **find_args(plt.savefig, **kwargs)) as rp:
        rp.title = title
        rp.plot(data=df, **find_args([RankPlot.plot, pd.DataFrame.plot], **kwargs))
        rp.x_axis(**find_args([RankPlot.x_axis], **kwargs))
        rp.y_axis(**find_args([RankPlot.y_axis], **kwargs))
        rp.label(**find_args([RankPlot.label], **kwargs))
        if show_legend:
            rp.legend(**find_args([RankPlot.legend, plt.legend], **kwargs))
        else:
            rp.legend_hide()
