from __future__ import annotations
from pathlib import Path
from typing import Any
from covpercapita.util.validator import Validator


class Filer(object):
    """Name the output files of a report in one directory.

    Args:
        directory: output directory, created if missing (nested names can be given as a list)
        prefix: string placed at the head of the basenames, like "world", or None
        digits: width of the zero-padded serial number placed after the prefix or None (no serial numbers)

    Note:
        Serial numbers are counted for each file extension.

    Examples:
        >>> import covpercapita as cp
        >>> filer = cp.Filer(directory="output", prefix="world", digits=2)
        >>> filer.png("series")
        {'filename': '<absolute path>/output/world_01_series.png'}
        >>> filer.csv("totals", index=False)
        {'path_or_buf': '<absolute path>/output/world_01_totals.csv', 'index': False}
    """

    def __init__(self, directory: list[str] | tuple[str, ...] | str | Path,
                 prefix: str | None = None, digits: int | None = None) -> None:
        parts = [directory] if isinstance(directory, (str, Path)) else directory
        self._dir_path = Path(*parts).resolve()
        self._dir_path.mkdir(parents=True, exist_ok=True)
        self._prefix = prefix
        self._digits = Validator(digits, "digits").int(value_range=(1, None))
        self._registered: dict[str, list[str]] = {}

    def _register(self, title: str, ext: str) -> str:
        registered = self._registered.setdefault(ext, [])
        heads = [] if self._prefix is None else [str(self._prefix)]
        if self._digits is not None:
            heads.append(str(len(registered) + 1).zfill(self._digits))
        filename = str(self._dir_path.joinpath(f"{'_'.join([*heads, title])}.{ext}"))
        registered.append(filename)
        return filename

    def files(self, ext: str | None = None) -> list[str]:
        """Return the registered filenames.

        Args:
            ext: file extension, like "png", or None (all extensions in the order of registration by extension)
        """
        if ext is None:
            return [filename for filenames in self._registered.values() for filename in filenames]
        return self._registered.get(ext, []).copy()

    def png(self, title: str, **kwargs: Any) -> dict[str, Any]:
        """Register a PNG file for a figure.

        Args:
            title: title of the figure used in the filename, like "series"
            kwargs: keyword arguments to include in the output

        Returns:
            keyword arguments of figure creation, like {"filename": <absolute filename>, **kwargs}
        """
        return {"filename": self._register(title=title, ext="png"), **kwargs}

    def csv(self, title: str, **kwargs: Any) -> dict[str, Any]:
        """Register a CSV file for a table.

        Args:
            title: title of the table used in the filename, like "totals"
            kwargs: keyword arguments of pandas.DataFrame.to_csv() to include in the output

        Returns:
            keyword arguments of pandas.DataFrame.to_csv(), like {"path_or_buf": <absolute filename>, **kwargs}
        """
        return {"path_or_buf": self._register(title=title, ext="csv"), **kwargs}
