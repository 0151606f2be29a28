#!/usr/bin/env python
# -*- coding: utf-8 -*-

from pathlib import Path
from pprint import pprint
import covpercapita as cp


def main(country="US", top_n=10):
    """Download JHU CSSE datasets, create figures and show the summary of per-capita values of countries.

    Args:
        country (str): country name to show time-series and descriptive statistics
        top_n (int): the number of countries to rank with deaths per million
    """
    print(cp.get_version())
    code_path = Path(__file__)
    output_dir = code_path.with_name("output").joinpath(code_path.stem)
    # Data preparation
    engineer = cp.DataEngineer(population_method="sum").download()
    print(engineer.citation())
    engineer.totals().to_csv(**cp.Filer(output_dir).csv("totals", index=False))
    # Figures and summary
    reporter = cp.Reporter(engineer=engineer, country=country, top_n=top_n)
    result = reporter.run(directory=output_dir)
    print(f"Per-million values in {country}:")
    print(result["summary"])
    print(f"Top {top_n} countries of deaths per million on {reporter.last_date():%Y-%m-%d}:")
    pprint(result["top"], compact=True)
    print("Linear regression of deaths per thousand with confirmed cases per thousand:")
    pprint(result["coefficients"])


if __name__ == "__main__":
    main()
