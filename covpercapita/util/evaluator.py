import numpy as np
import pandas as pd
from covpercapita.util.error import UnExpectedValueError, NAFoundError
from covpercapita.util.validator import Validator


def _residuals(y_true, y_pred):
    return y_pred - y_true


class Evaluator(object):
    """Score how well predicted values (e.g. deaths per thousand of a regression line) match the observed values.

    Args:
        y_true (pandas.Series or list[float]): observed values
        y_pred (pandas.Series or list[float]): predicted values, the same length as @y_true

    Raises:
        NAFoundError: NA values were included
        ValueError: the lengths of @y_true and @y_pred are different

    Note:
        ME (maximum absolute residual), MAE, MSE and RMSE are better when smaller. R2 (coefficient of determination) is better when larger.
    """
    _SCORERS = {
        "ME": lambda t, p: np.abs(_residuals(t, p)).max(),
        "MAE": lambda t, p: np.abs(_residuals(t, p)).mean(),
        "MSE": lambda t, p: np.square(_residuals(t, p)).mean(),
        "RMSE": lambda t, p: np.sqrt(np.square(_residuals(t, p)).mean()),
        "R2": lambda t, p: 1 - np.square(_residuals(t, p)).sum() / np.square(t - t.mean()).sum(),
    }
    _LARGER_IS_BETTER = ["R2"]

    def __init__(self, y_true, y_pred):
        self._true = self._to_array(y_true, "y_true")
        self._pred = self._to_array(y_pred, "y_pred")
        if self._true.size != self._pred.size:
            raise ValueError(f"y_true and y_pred must have the same length, but {self._true.size} and {self._pred.size}.")

    @staticmethod
    def _to_array(values, name):
        Validator(values, name, accept_none=False).instance(expected=(pd.Series, list, tuple, np.ndarray))
        series = pd.Series(values, dtype="float64")
        if series.isna().any():
            raise NAFoundError(name, values)
        return series.to_numpy()

    @classmethod
    def _metric(cls, metric):
        name = str(metric).upper()
        if name not in cls._SCORERS:
            raise UnExpectedValueError("metric", metric, candidates=cls.metrics())
        return name

    def score(self, metric="RMSE"):
        """Return the score with the metric.

        Args:
            metric (str): ME, MAE, MSE, RMSE or R2 (case insensitive)

        Raises:
            UnExpectedValueError: un-expected metric was applied

        Returns:
            float: the score
        """
        return float(self._SCORERS[self._metric(metric)](self._true, self._pred))

    @classmethod
    def metrics(cls):
        """list[str]: names of the available metrics
        """
        return list(cls._SCORERS)

    @classmethod
    def smaller_is_better(cls, metric="RMSE"):
        """bool: whether smaller scores of the metric mean better fitting or not
        """
        return cls._metric(metric) not in cls._LARGER_IS_BETTER
