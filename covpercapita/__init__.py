# flake8: noqa

# version
from covpercapita.__version__ import __version__
# util
from covpercapita.util.config import config
from covpercapita.util.stopwatch import StopWatch
from covpercapita.util.error import SubsetNotFoundError, UnExecutedError, NotEnoughDataError
from covpercapita.util.error import NotIncludedError, NAFoundError, UnExpectedTypeError, UnExpectedNoneError
from covpercapita.util.error import EmptyError, UnExpectedValueRangeError, UnExpectedValueError
from covpercapita.util.filer import Filer
from covpercapita.util.evaluator import Evaluator
from covpercapita.util.validator import Validator
from covpercapita.util.term import Term
# visualization
from covpercapita.visualization.vbase import VisualizeBase
from covpercapita.visualization.line_plot import LinePlot, line_plot
from covpercapita.visualization.rank_plot import RankPlot, rank_plot
from covpercapita.visualization.scatter_plot import ScatterPlot, scatter_plot
# gis
from covpercapita.gis.world_map import WorldMap
# downloading
from covpercapita.downloading.downloader import DataDownloader
# engineering
from covpercapita.engineering._reshaper import wide_to_long
from covpercapita.engineering.engineer import DataEngineer
# science
from covpercapita.science.regression import RateRegressor
# report
from covpercapita.report import Reporter


def get_version():
    """
    Return the version number, like CovPerCapita v0.0.0

    Returns:
        str
    """
    return f"CovPerCapita v{__version__}"
