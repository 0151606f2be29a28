#!/usr/bin/env python
# -*- coding: utf-8 -*-

from pathlib import Path
from pprint import pprint
import covpercapita as cp


def main(state="New York", top_n=10):
    """Download JHU CSSE US datasets, create figures and show the summary of per-capita values of states.

    Args:
        state (str): state name to show time-series and descriptive statistics
        top_n (int): the number of states to rank with deaths per million
    """
    print(cp.get_version())
    code_path = Path(__file__)
    output_dir = code_path.with_name("output").joinpath(code_path.stem)
    engineer = cp.DataEngineer().download(us=True)
    reporter = cp.Reporter(engineer=engineer, country=state, top_n=top_n)
    result = reporter.run(directory=output_dir, prefix="us")
    print(f"Per-million values in {state}:")
    print(result["summary"])
    print(f"Top {top_n} states of deaths per million:")
    pprint(result["top"], compact=True)
    print("Linear regression of deaths per thousand with confirmed cases per thousand:")
    pprint(result["coefficients"])


if __name__ == "__main__":
    main()
