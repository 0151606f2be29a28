import io
from urllib.error import HTTPError
from urllib.parse import urlparse
from urllib3 import PoolManager, Retry
from urllib3.util.ssl_ import create_urllib3_context
import warnings
import pandas as pd
from unidecode import unidecode
from covpercapita.util.config import config
from covpercapita.util.validator import Validator


class _DataProvider(object):
    """Read remote/local CSV files as dataframes.

    Args:
        user_agent (str): value of User-Agent header used with remote files
    """

    def __init__(self, user_agent="Mozilla/5.0"):
        self._user_agent = str(user_agent)

    def provide(self, path, columns=None, title=None):
        """Provide the dataset as a dataframe, checking the columns.

        Args:
            path (str or pathlib.Path): URL or local filename of the CSV file
            columns (list[str] or None): column names the dataset must have or None (no check)
            title (str or None): title of the dataset used in log messages or None (path)

        Raises:
            NotIncludedError: some of @columns were not included in the dataset

        Returns:
            pandas.DataFrame: raw data with all columns of the file
        """
        config.info(f"Retrieving {title or path}")
        df = self.read_csv(path, user_agent=self._user_agent)
        config.debug(f"{title or path}: {len(df)} rows x {len(df.columns)} columns")
        return Validator(df, title or str(path)).dataframe(columns=columns)

    @staticmethod
    def read_csv(path, user_agent="Mozilla/5.0"):
        """Read the CSV file and return as a dataframe.

        Args:
            path (str or pathlib.Path): URL or local filename of the CSV file
            user_agent (str): value of User-Agent header used with remote files

        Returns:
            pandas.DataFrame: data with transliterated text values

        Raises:
            urllib.error.HTTPError: the server returned an error status, like 404

        Note:
            Remote files are downloaded with urllib3 once, accepting servers with legacy TLS settings.
            Connection and parse errors are raised as-is without retry.
        """
        warnings.filterwarnings("ignore", category=pd.errors.DtypeWarning)
        path = str(path)
        kwargs = {"header": 0, "encoding": "utf-8", "engine": "pyarrow"}
        if urlparse(path).scheme not in ("http", "https"):
            df = pd.read_csv(path, **kwargs)
        else:
            ctx = create_urllib3_context()
            ctx.load_default_certs()
            # ssl.OP_LEGACY_SERVER_CONNECT
            ctx.options |= 0x4
            with PoolManager(ssl_context=ctx, retries=Retry(connect=0, read=0, status=0, other=0, redirect=5)) as http:
                r = http.request("GET", path, headers={"User-Agent": user_agent})
            if r.status >= 400:
                raise HTTPError(path, r.status, r.reason, r.headers, None)
            df = pd.read_csv(io.BytesIO(r.data), **kwargs)
        for col in df.columns:
            if pd.api.types.is_string_dtype(df[col]):
                df[col] = df[col].map(lambda x: unidecode(x) if isinstance(x, str) else x)
        return df
