#!/usr/bin/env python
# -*- coding: utf-8 -*-

import pandas as pd
from covpercapita.util.config import config
from covpercapita.util.validator import Validator
from covpercapita.util.term import Term


class _DataJoiner(Term):
    """Class to join, aggregate and filter long-format records.

    Note:
        All methods return new dataframes and do not change the arguments.
    """
    POPULATION_METHODS = ["sum", "first"]

    def _keys(self, *data):
        """Return the key columns shared by all dataframes.

        Args:
            data (pandas.DataFrame): dataframes

        Returns:
            list[str]: Country, Province, City (when all dataframes have) and Date
        """
        areas = [col for col in [*self.AREA_COLUMNS, self.CITY] if all(col in df for df in data)]
        return [*areas, self.DATE]

    def combine(self, cases, deaths):
        """Union the number of confirmed cases and deaths with full outer join.

        Args:
            cases (pandas.DataFrame): long-format data with Confirmed column
            deaths (pandas.DataFrame): long-format data with Fatal column

        Returns:
            pandas.DataFrame:
                Index
                    reset index
                Columns
                    - Country, Province, (City), Date: keys
                    - Confirmed (pandas.Int64): the number of confirmed cases or NA (not included in @cases)
                    - Fatal (pandas.Int64): the number of deaths or NA (not included in @deaths)
        """
        keys = self._keys(cases, deaths)
        c_df = Validator(cases, "cases").dataframe(columns=[*keys, self.C])
        f_df = Validator(deaths, "deaths").dataframe(columns=[*keys, self.F])
        df = c_df.loc[:, [*keys, self.C]].merge(f_df.loc[:, [*keys, self.F]], how="outer", on=keys)
        return df.sort_values(keys, ignore_index=True)

    def population_lookup(self, lookup):
        """Create country-level population table with the first record of each country.

        Args:
            lookup (pandas.DataFrame): lookup table
                Index
                    reset index
                Columns
                    - Country_Region or Country (object): country names
                    - Population (float): population values or NA
                    - the other columns will be ignored

        Returns:
            pandas.DataFrame:
                Index
                    reset index
                Columns
                    - Country (object): country names, unique
                    - Population (float): population values or NA

        Note:
            Country-level records precede province-level records in the lookup table of JHU CSSE.
            Values of the provinces will be ignored.
        """
        df = Validator(lookup, "lookup").dataframe().rename(columns=self.RAW_AREA_DICT)
        df = Validator(df, "lookup").dataframe(columns=[self.COUNTRY, self.N])
        df = df.drop_duplicates(subset=[self.COUNTRY], keep="first")
        df[self.N] = pd.to_numeric(df[self.N]).astype("float64")
        return df.loc[:, [self.COUNTRY, self.N]].reset_index(drop=True)

    def attach_population(self, data, population, on=None):
        """Add population values with left join.

        Args:
            data (pandas.DataFrame): long-format data
            population (pandas.DataFrame): population table with the columns defined by @on and Population
            on (list[str] or None): columns to join on or None (["Country"])

        Returns:
            pandas.DataFrame: @data with Population column

        Note:
            This is many-to-one join: all provinces of a country receive the same population value with on=["Country"].
        """
        on = Validator(on, "on").sequence(default=[self.COUNTRY])
        df = Validator(data, "data").dataframe(columns=on)
        pop_df = Validator(population, "population").dataframe(columns=[*on, self.N]).loc[:, [*on, self.N]]
        df = df.drop(columns=[self.N], errors="ignore")
        return df.merge(pop_df, how="left", on=on, validate="many_to_one")

    def aggregate(self, data, layer, population_method="sum"):
        """Aggregate records to layer-day level, summing the values of lower layers.

        Args:
            data (pandas.DataFrame): long-format data with Date, Confirmed, Fatal, Population columns and @layer column
            layer (str): column name of the layer to keep, like Country
            population_method (str): "sum" (sum of the records) or "first" (the first available value)

        Returns:
            pandas.DataFrame:
                Index
                    reset index
                Columns
                    - (object): column named with @layer
                    - Date (pandas.Timestamp): observation dates
                    - Confirmed (float): the number of confirmed cases or NA
                    - Fatal (float): the number of deaths or NA
                    - Population (float): population values or NA

        Note:
            When a record of a layer-day has NA as a value, the aggregated value will be NA.

        Note:
            With population_method="sum", population values which are copied to all provinces
            of a country by country-level join will be summed and over-counted.
        """
        method = Validator(population_method, "population_method").candidate(self.POPULATION_METHODS)
        value_cols = [self.C, self.F, self.N]
        keys = [layer, self.DATE]
        df = Validator(data, "data").dataframe(columns=[*keys, *value_cols])
        df[value_cols] = df[value_cols].astype("float64")
        grouped = df.groupby(keys, sort=True)
        summed = grouped[value_cols].sum(min_count=1)
        # Sum will be NA when any of the values is NA
        summed = summed.where(grouped[value_cols].count().eq(grouped.size(), axis=0))
        if method == "first":
            summed[self.N] = grouped[self.N].first()
        self._log_inflation(df=df, layer=layer, method=method)
        return summed.reset_index().loc[:, [*keys, *value_cols]]

    def _log_inflation(self, df, layer, method):
        """Show the names of areas whose population values were summed over multiple records.
        """
        if method != "sum":
            return
        records = df.groupby([layer, self.DATE]).size().groupby(level=0).max()
        inflated = records[records > 1].index.tolist()
        if inflated:
            config.debug(
                f"Population values were summed over multiple records of {len(inflated)} areas: {', '.join(map(str, inflated))}")

    def per_capita(self, data, variables=None, scale=1_000_000):
        """Calculate per-capita values.

        Args:
            data (pandas.DataFrame): data with Population column and @variables
            variables (list[str] or None): variables to convert or None (["Confirmed", "Fatal"])
            scale (int): 1,000,000 (per million) or 1,000 (per thousand)

        Returns:
            pandas.DataFrame: @data with new columns, like Confirmed_per_million (float)

        Note:
            When population is 0 or NA, per-capita values will be NA.
        """
        variables = Validator(variables, "variables").sequence(default=self.VALUE_COLUMNS)
        df = Validator(data, "data").dataframe(columns=[*variables, self.N])
        population = df[self.N].astype("float64")
        population = population.where(population > 0)
        for variable in variables:
            df[self.per_capita_name(variable, scale)] = df[variable].astype("float64") * scale / population
        return df

    def new_values(self, data, layer, variables=None):
        """Calculate daily new values with the difference from the previous date.

        Args:
            data (pandas.DataFrame): data with @layer, Date and @variables columns
            layer (str or list[str]): column name(s) of locations
            variables (list[str] or None): cumulative variables or None (["Confirmed", "Fatal"])

        Returns:
            pandas.DataFrame: @data sorted by @layer and Date with new columns, like Confirmed_new (float)

        Note:
            The values of the first date of each location are NA.
        """
        layers = [layer] if isinstance(layer, str) else Validator(layer, "layer").sequence()
        variables = Validator(variables, "variables").sequence(default=self.VALUE_COLUMNS)
        df = Validator(data, "data").dataframe(columns=[*layers, self.DATE, *variables])
        df = df.sort_values([*layers, self.DATE], ignore_index=True)
        for variable in variables:
            df[f"{variable}{self.NEW}"] = df[variable].astype("float64").groupby([df[col] for col in layers]).diff()
        return df

    def complete(self, data, integer_columns=None):
        """Remove records which have NA in any columns.

        Args:
            data (pandas.DataFrame): data
            integer_columns (list[str] or None): columns to convert to pandas.Int64 or None (["Confirmed", "Fatal", "Population"])

        Returns:
            pandas.DataFrame: data without NAs (reset index)
        """
        df = Validator(data, "data").dataframe()
        df_complete = df.dropna(how="any").reset_index(drop=True)
        if len(df_complete) < len(df):
            config.debug(f"{len(df) - len(df_complete)} records were removed because they have NA values")
        int_cols = Validator(integer_columns, "integer_columns").sequence(default=[self.C, self.F, self.N])
        int_cols = [col for col in int_cols if col in df_complete]
        df_complete[int_cols] = df_complete[int_cols].round().astype("Int64")
        return df_complete

    def totals(self, data, layer):
        """Return the latest values of each area, assuming that the values are cumulative.

        Args:
            data (pandas.DataFrame): layer-day data with @layer, Confirmed, Fatal and Population columns
            layer (str): column name of locations, like Country

        Returns:
            pandas.DataFrame:
                Index
                    reset index
                Columns
                    - (object): column named with @layer
                    - Confirmed (pandas.Int64): max value of the number of confirmed cases
                    - Fatal (pandas.Int64): max value of the number of deaths
                    - Population (pandas.Int64): max value of population
                    - Confirmed_per_thousand (float): confirmed cases per thousand people
                    - Fatal_per_thousand (float): deaths per thousand people

        Note:
            Areas which have 0 confirmed cases or 0 population are excluded.
        """
        value_cols = [self.C, self.F, self.N]
        df = Validator(data, "data").dataframe(columns=[layer, *value_cols])
        df = df.groupby(layer, sort=True)[value_cols].max().reset_index()
        df = df.loc[df[self.C].gt(0).fillna(False) & df[self.N].gt(0).fillna(False)]
        df = self.per_capita(df, scale=self.THOUSAND)
        return df.loc[:, [layer, *value_cols, self.C_PT, self.F_PT]].reset_index(drop=True)
