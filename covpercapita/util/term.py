from __future__ import annotations
from covpercapita.util.validator import Validator


class Term(object):
    """
    Term definition.
    """
    # Variables
    N: str = "Population"
    C: str = "Confirmed"
    F: str = "Fatal"
    # Daily new values
    NEW: str = "_new"
    C_NEW: str = f"{C}{NEW}"
    F_NEW: str = f"{F}{NEW}"
    # Per-capita values
    PER_MILLION: str = "_per_million"
    PER_THOUSAND: str = "_per_thousand"
    C_PM: str = f"{C}{PER_MILLION}"
    F_PM: str = f"{F}{PER_MILLION}"
    C_PT: str = f"{C}{PER_THOUSAND}"
    F_PT: str = f"{F}{PER_THOUSAND}"
    # Column names
    DATE: str = "Date"
    COUNTRY: str = "Country"
    PROVINCE: str = "Province"
    CITY: str = "City"
    AREA_COLUMNS: list[str] = [COUNTRY, PROVINCE]
    KEY_COLUMNS: list[str] = [*AREA_COLUMNS, DATE]
    VALUE_COLUMNS: list[str] = [C, F]
    RATE_COLUMNS: list[str] = [C_PM, F_PM]
    TOTAL_COLUMNS: list[str] = [COUNTRY, C, F, N, C_PT, F_PT]
    # Raw column names of JHU CSSE datasets
    RAW_AREA_DICT: dict[str, str] = {
        "Province/State": PROVINCE,
        "Province_State": PROVINCE,
        "Country/Region": COUNTRY,
        "Country_Region": COUNTRY,
        "Admin2": CITY,
    }
    # Date format of the column names of JHU CSSE time-series: 1/22/20 etc.
    RAW_DATE_FORMAT: str = "%m/%d/%y"
    # Scales of per-capita values
    MILLION: int = 1_000_000
    THOUSAND: int = 1_000
    # Regression
    A: str = "_actual"
    P: str = "_predicted"
    ACTUAL: str = "Actual"
    PREDICTED: str = "Predicted"
    # Flag
    NA: str = "-"

    @classmethod
    def per_capita_name(cls, variable: str, scale: int) -> str:
        """Return the column name of per-capita values.

        Args:
            variable (str): variable name, like Confirmed
            scale (int): scale of per-capita values, 1,000 or 1,000,000

        Returns:
            str: column name, like Confirmed_per_million

        Examples:
            >>> Term.per_capita_name("Fatal", 1_000)
            'Fatal_per_thousand'
        """
        suffix_dict = {cls.MILLION: cls.PER_MILLION, cls.THOUSAND: cls.PER_THOUSAND}
        scale = Validator(scale, "scale").candidate(list(suffix_dict))
        return f"{variable}{suffix_dict[scale]}"
