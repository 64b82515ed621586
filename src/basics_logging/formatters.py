"""Log record formatters."""

import logging

DEFAULT_FORMAT = (
    "%(asctime)s %(levelname)-5s [%(real_module)s.%(real_funcName)s:%(real_lineno)d] "
    "%(message)s"
)


class SafeFormatter(logging.Formatter):
    """Formatter that tolerates records missing the ``real_*`` caller fields.

    ``CallerFilter`` normally fills these in; records emitted through loggers that
    were configured elsewhere fall back to the record's own location.
    """

    def __init__(self, fmt: str | None = None, datefmt: str | None = None) -> None:
        super().__init__(fmt or DEFAULT_FORMAT, datefmt)

    def format(self, record: logging.LogRecord) -> str:
        if not hasattr(record, "real_module"):
            record.real_module = record.module
        if not hasattr(record, "real_funcName"):
            record.real_funcName = record.funcName
        if not hasattr(record, "real_lineno"):
            record.real_lineno = record.lineno
        if record.levelname == "WARNING":
            record.levelname = "WARN"
        return super().format(record)


class CallerFilter(logging.Filter):
    """Copy the caller location onto ``real_*`` attributes of each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.real_module = record.module
        record.real_funcName = record.funcName
        record.real_lineno = record.lineno
        return True
