#!/usr/bin/env python
# -*- coding: utf-8 -*-

from inspect import signature
import sys
import matplotlib
if not hasattr(sys, "ps1"):
    matplotlib.use("Agg")
from matplotlib import pyplot as plt
from covpercapita.util.error import UnExecutedError
from covpercapita.util.validator import Validator
from covpercapita.util.term import Term

plt.style.use("fast")
plt.rcParams.update({
    "xtick.direction": "in",
    "ytick.direction": "in",
    "font.size": 11.0,
    "figure.figsize": (9, 6),
    "legend.frameon": False,
})


def find_args(func_list, **kwargs):
    """Select the keyword arguments which the function(s) accept.

    Args:
        func_list (list[function] or function): functions/methods to call
        kwargs: keyword arguments given to a wrapper function, like line_plot()

    Returns:
        dict[str, object]: the keyword arguments accepted by at least one of the functions
    """
    funcs = func_list if isinstance(func_list, list) else [func_list]
    accepted = set().union(*(signature(func).parameters for func in funcs)) - {"self", "cls"}
    return {key: value for (key, value) in kwargs.items() if key in accepted}


class VisualizeBase(Term):
    """Base class of figures, used with "with" statement.

    Args:
        filename (str or None): filename to save the figure or None (display it)
        bbox_inches (str): bounding box in inches
        kwargs: the other arguments of matplotlib.pyplot.savefig()

    Note:
        The figure is saved (or displayed) and closed when exiting "with" block.
    """

    def __init__(self, filename=None, bbox_inches="tight", **kwargs):
        self._filename = filename
        self._savefig_dict = {"bbox_inches": bbox_inches, **kwargs}
        self._title = ""
        self._variables = []
        _, self._ax = plt.subplots(1, 1)

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        if self._ax is not None and self._title:
            self._ax.set_title(self._title)
        plt.tight_layout()
        if self._filename is None:
            plt.show()
            return
        plt.savefig(self._filename, **self._savefig_dict)
        plt.close("all")

    @property
    def title(self):
        """str: title of the figure, empty string means no title
        """
        return self._title

    @title.setter
    def title(self, title):
        self._title = "" if title is None else str(title)

    @property
    def ax(self):
        """matplotlib.axes.Axes: axes of the figure
        """
        return self._ax

    @ax.setter
    def ax(self, ax):
        self._ax = Validator(ax, "ax").instance(matplotlib.axes.Axes)

    def plot(self):
        """Draw the figure, defined by the child classes.

        Raises:
            NotImplementedError: called with VisualizeBase itself
        """
        raise NotImplementedError

    def legend(self, bbox_to_anchor=(0.5, -0.2), bbox_loc="lower center", ncol=None, **kwargs):
        """Show the legend.

        Args:
            bbox_to_anchor (tuple(int or float, int or float)): position of the legend box
            bbox_loc (str): location of the legend box
            ncol (int or None): the number of columns or None (1 with "left" locations, up to 5 for the others)
            kwargs: keyword arguments of matplotlib.pyplot.legend()

        Raises:
            UnExecutedError: .plot() has not been called
        """
        if not self._variables:
            raise UnExecutedError(".plot()")
        default_ncol = 1 if "left" in bbox_loc else min(len(self._variables), 5)
        ncol = Validator(ncol, "ncol").int(value_range=(1, None), default=default_ncol)
        self._ax.legend(bbox_to_anchor=bbox_to_anchor, loc=bbox_loc, borderaxespad=0, ncol=ncol, **kwargs)

    def legend_hide(self):
        """Hide the legend when shown.
        """
        if self._ax.get_legend() is not None:
            self._ax.get_legend().set_visible(False)

    @staticmethod
    def _plot_colors(variables, colormap=None, color_dict=None):
        """Return color arguments of pandas.DataFrame.plot().

        Args:
            variables (list[str] or pandas.Index): names of the lines
            colormap (str, matplotlib colormap object or None): colormap
            color_dict (dict[str, str] or None): colors of the lines or None (decided with @colormap)
        """
        if color_dict is None:
            return {"colormap": colormap}
        return {"colormap": colormap, "color": [color_dict[col] for col in variables if col in color_dict]}
