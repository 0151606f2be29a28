from __future__ import annotations
import pandas as pd
from sklearn.linear_model import LinearRegression
from covpercapita.util.config import config
from covpercapita.util.error import NotEnoughDataError
from covpercapita.util.evaluator import Evaluator
from covpercapita.util.validator import Validator
from covpercapita.util.term import Term
from covpercapita.visualization.scatter_plot import scatter_plot


class RateRegressor(Term):
    """Linear regression of one per-capita value with another one, like deaths per thousand with cases per thousand.

    Args:
        data: data to fit, like the output of covpercapita.DataEngineer.totals()
        x: column name of the explanatory variable
        y: column name of the target variable
        layer: column name of location names, used as the index of outputs

    Raises:
        NotEnoughDataError: less than 2 records are available after NA values are removed
    """

    def __init__(self, data: pd.DataFrame, x: str = Term.C_PT, y: str = Term.F_PT, layer: str = Term.COUNTRY) -> None:
        self._x, self._y, self._layer = str(x), str(y), str(layer)
        df = Validator(data, "data").dataframe(columns=[self._layer, self._x, self._y])
        df = df.loc[:, [self._layer, self._x, self._y]].dropna().set_index(self._layer)
        if len(df) < 2:
            raise NotEnoughDataError("data", df, required_n=2)
        self._df = df.astype("float64")
        self._model = LinearRegression().fit(self._df[[self._x]], self._df[self._y])
        config.info(f"Fitted {self._y} = {self.coefficients()['intercept']:.4f} + {self.coefficients()['slope']:.4f} * {self._x}")

    def coefficients(self) -> dict[str, float]:
        """Return the coefficients of the fitted line.

        Returns:
            intercept, slope and r2 (coefficient of determination) with float values
        """
        return {
            "intercept": float(self._model.intercept_),
            "slope": float(self._model.coef_[0]),
            "r2": float(self._model.score(self._df[[self._x]], self._df[self._y])),
        }

    def predict(self, x_values: pd.Series | list[float]) -> pd.Series:
        """Predict the target values with the fitted line.

        Args:
            x_values: values of the explanatory variable

        Returns:
            predicted values (name: @y of RateRegressor())
        """
        series = pd.Series(x_values, dtype="float64")
        predicted = self._model.predict(pd.DataFrame({self._x: series.to_numpy()}))
        return pd.Series(predicted, index=series.index, name=self._y)

    def predicted(self) -> pd.DataFrame:
        """Return observed and predicted values of the fitted records.

        Returns:
            Index
                location names
            Columns
                - (float): column named with @x of RateRegressor(), explanatory variable
                - {y}_actual (float): observed target values
                - {y}_predicted (float): predicted target values
        """
        df = self._df.copy()
        df[f"{self._y}{self.P}"] = self.predict(df[self._x]).to_numpy()
        return df.rename(columns={self._y: f"{self._y}{self.A}"})

    def score(self, metric: str = "RMSE") -> float:
        """Evaluate the fitting with observed and predicted values.

        Args:
            metric: ME, MAE, MSE, RMSE or R2

        Returns:
            score of the metric
        """
        df = self.predicted()
        return Evaluator(df[f"{self._y}{self.A}"], df[f"{self._y}{self.P}"]).score(metric=metric)

    def plot(self, filename: str | None = None, title: str | None = None, **kwargs) -> None:
        """Create a scatter plot of observed values with the line of predicted values.

        Args:
            filename: filename to save the figure or None (display)
            title: title of the figure or None (automatically determined)
            kwargs: keyword arguments of covpercapita.scatter_plot()
        """
        df = self.predicted().reset_index(drop=True)
        coef_dict = self.coefficients()
        scatter_plot(
            df.rename(columns={self._x: "x", f"{self._y}{self.A}": "y"}),
            title=title or f"{self._y} = {coef_dict['intercept']:.3g} + {coef_dict['slope']:.3g} * {self._x} (R2={coef_dict['r2']:.3f})",
            filename=filename, predicted=df[f"{self._y}{self.P}"], xlabel=self._x, ylabel=self._y, **kwargs)
