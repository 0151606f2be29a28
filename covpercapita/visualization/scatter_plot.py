#!/usr/bin/env python
# -*- coding: utf-8 -*-

from matplotlib import pyplot as plt
import pandas as pd
from covpercapita.util.error import UnExecutedError
from covpercapita.util.validator import Validator
from covpercapita.visualization.vbase import find_args
from covpercapita.visualization.line_plot import LinePlot


class ScatterPlot(LinePlot):
    """Create a scatter plot with optional line of predicted values.

    Args:
        filename (str or None): filename to save the figure or None (display)
        bbox_inches (str): bounding box in inches when creating the figure
        kwargs: the other arguments of matplotlib.pyplot.savefig()
    """

    def __init__(self, filename=None, bbox_inches="tight", **kwargs):
        super().__init__(filename=filename, bbox_inches=bbox_inches, **kwargs)
        self._data = pd.DataFrame(columns=["x", "y"])

    def plot(self, data, color="tab:blue", **kwargs):
        """Plot observed values.

        Args:
            data (pandas.DataFrame): data to show
                Index
                    reset index
                Columns
                    x (int or float): x values
                    y (int or float): y values
            color (str): color of the points
            kwargs: keyword arguments of pandas.DataFrame.plot.scatter()
        """
        self._data = Validator(data, "data").dataframe(columns=["x", "y"], empty_ok=False)
        self._variables = ["y"]
        self._data.plot.scatter(x="x", y="y", ax=self._ax, color=color, label=self.ACTUAL, **kwargs)

    def x_axis(self, xlabel=None, xlim=(None, None)):
        """Set x axis.

        Args:
            xlabel (str or None): x-label
            xlim (tuple(int or float, int or float)): limit of x domain
        """
        self._ax.set_xlabel(xlabel)
        self._ax.set_xlim(*xlim)

    def y_axis(self, ylabel=None, ylim=(None, None)):
        """Set y axis.

        Args:
            ylabel (str or None): y-label
            ylim (tuple(int or float, int or float)): limit of y domain
        """
        self._ax.set_ylabel(ylabel)
        self._ax.set_ylim(*ylim)

    def line_predicted(self, predicted=None, color="tab:red", linestyle="-"):
        """Show predicted values as a line.

        Args:
            predicted (pandas.Series or None): predicted y values with the same index as the data or None (not shown)
            color (str): color of the line
            linestyle (str): linestyle

        Raises:
            UnExecutedError: ScatterPlot.plot() has not been called
        """
        if self._data.empty:
            raise UnExecutedError("ScatterPlot.plot()")
        if predicted is None:
            return
        series = Validator(predicted, "predicted").instance(pd.Series)
        df = pd.DataFrame({"x": self._data["x"], "y": series.reindex(self._data.index)}).dropna().sort_values("x")
        self._ax.plot(df["x"], df["y"], color=color, linestyle=linestyle, label=self.PREDICTED)
        self._variables = ["y", "predicted"]


def scatter_plot(df, title=None, filename=None, predicted=None, show_legend=True, **kwargs):
    """Wrapper function: show observed values with predicted values.

    Args:
        df (pandas.DataFrame): data to show
            Index
                reset index
            Columns
                x (int or float): x values
                y (int or float): y values
        title (str): title of the figure
        filename (str or None): filename to save the figure or None (display)
        predicted (pandas.Series or None): predicted y values with the same index as @df or None (not shown)
        show_legend (bool): whether show legend or not
        kwargs: keyword arguments of the following classes and methods.
            - covpercapita.ScatterPlot() and its methods,
            - matplotlib.pyplot.savefig(), matplotlib.pyplot.legend(),
            - pandas.DataFrame.plot.scatter()
    """
    with ScatterPlot(filename=filename, **find_args(plt.savefig, **kwargs)) as sp:
        sp.title = title
        sp.plot(data=df, **find_args([ScatterPlot.plot], **kwargs))
        sp.x_axis(**find_args([ScatterPlot.x_axis], **kwargs))
        sp.y_axis(**find_args([ScatterPlot.y_axis], **kwargs))
        sp.line_predicted(predicted=predicted, **find_args([ScatterPlot.line_predicted], **kwargs))
        if show_legend:
            sp.legend(**find_args([ScatterPlot.legend, plt.legend], **kwargs))
        else:
            sp.legend_hide()
