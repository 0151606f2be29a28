#!/usr/bin/env python
# -*- coding: utf-8 -*-

from matplotlib import pyplot as plt
from matplotlib.ticker import ScalarFormatter
import pandas as pd
from covpercapita.util.validator import Validator
from covpercapita.visualization.vbase import VisualizeBase, find_args


class LinePlot(VisualizeBase):
    """Line chart of time-series, like the cumulative number of cases and deaths of a country.

    Args:
        filename (str or None): filename to save the figure or None (display it)
        bbox_inches (str): bounding box in inches
        kwargs: the other arguments of matplotlib.pyplot.savefig()
    """

    def plot(self, data, colormap=None, color_dict=None, **kwargs):
        """Draw one line for each column.

        Args:
            data (pandas.DataFrame or pandas.Series): values to show
                Index
                    Date (pandas.Timestamp): observation dates
                Columns
                    variables (one line for one column)
            colormap (str, matplotlib colormap object or None): colormap of the lines
            color_dict (dict[str, str] or None): colors of the lines or None (decided with @colormap)
            kwargs: keyword arguments of pandas.DataFrame.plot()

        Raises:
            EmptyError: @data has no records
        """
        df = Validator(data.to_frame() if isinstance(data, pd.Series) else data, "data").dataframe(empty_ok=False)
        self._variables = [str(col) for col in df.columns]
        df.plot(ax=self._ax, **self._plot_colors(df.columns, colormap=colormap, color_dict=color_dict), **kwargs)

    def x_axis(self, xlabel=None, xlim=(None, None)):
        """Set the label and limits of x-axis.

        Args:
            xlabel (str or None): label of x-axis
            xlim (tuple(pandas.Timestamp or None, pandas.Timestamp or None)): limits, None means automatic
        """
        self._ax.set_xlabel(xlabel)
        self._ax.set_xlim(*xlim)

    def y_axis(self, ylabel="Cases", y_logscale=False, ylim=(0, None), math_scale=True, y_integer=False):
        """Set the label, scale and limits of y-axis.

        Args:
            ylabel (str or None): label of y-axis
            y_logscale (bool): whether use log scale or not
            ylim (tuple(int or float or None, int or float or None)): limits, None means automatic
            math_scale (bool): whether show the tick labels like 1.0x10^5 or not (ignored with log scale)
            y_integer (bool): whether show the tick labels as plain integers or not (ignored with log scale)

        Note:
            With log scale, the lower limit 0 is replaced with automatic determination.
        """
        self._ax.set_ylabel(ylabel)
        lower, upper = ylim
        if y_logscale:
            self._ax.set_yscale("log")
            lower = lower or None
        elif y_integer or math_scale:
            formatter = ScalarFormatter(useOffset=False, useMathText=not y_integer)
            formatter.set_scientific(not y_integer)
            formatter.set_powerlimits((0, 0))
            self._ax.yaxis.set_major_formatter(formatter)
        self._ax.set_ylim(lower, upper)

    def line(self, v=None, h=None, color="black", linestyle=":"):
        """Draw vertical/horizontal reference lines.

        Args:
            v (list[pandas.Timestamp] or pandas.Timestamp or None): x values of vertical lines
            h (list[int or float] or int or float or None): y values of horizontal lines
            color (str): color of the lines
            linestyle (str): linestyle of the lines
        """
        def _as_list(values):
            if values is None:
                return []
            return list(values) if isinstance(values, (list, tuple)) else [values]

        for value in _as_list(v):
            self._ax.axvline(x=value, color=color, linestyle=linestyle)
        for value in _as_list(h):
            self._ax.axhline(y=value, color=color, linestyle=linestyle)


def line_plot(df, title=None, filename=None, show_legend=True, **kwargs):
    """Wrapper function: draw a line chart of time-series.

    Args:
        df (pandas.DataFrame or pandas.Series): values to show with Date index
        title (str or None): title of the figure
        filename (str or None): filename to save the figure or None (display it)
        show_legend (bool): whether show the legend or not
        kwargs: keyword arguments of LinePlot(), its methods, matplotlib.pyplot.legend() and pandas.DataFrame.plot()

    Examples:
        >>> import covpercapita as cp
        >>> engineer = cp.DataEngineer().download()
        >>> cp.line_plot(engineer.subset("Japan")[["Confirmed", "Fatal"]], title="Japan", y_logscale=True)
    """
    with LinePlot(filename=filename, **find_args(plt.savefig, **kwargs)) as lp:
        lp.title = title
        lp.plot(data=df, **find_args([LinePlot.plot, pd.DataFrame.plot], **kwargs))
        lp.x_axis(**find_args(LinePlot.x_axis, **kwargs))
        lp.y_axis(**find_args(LinePlot.y_axis, **kwargs))
        lp.line(**find_args(LinePlot.line, **kwargs))
        if show_legend:
            lp.legend(**find_args([LinePlot.legend, plt.legend], **kwargs))
        else:
            lp.legend_hide()
