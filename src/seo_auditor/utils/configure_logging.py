import logging
import sys

from tqdm import tqdm

AUDIT_LOGGER = "seo_auditor"


class LogWithTqdm(logging.Handler):
    """
    Writes records through `tqdm.write()` so audit notices and parser
    warnings print above the progress bar instead of through it.
    """
    def emit(self, record):
        try:
            tqdm.write(self.format(record), file=sys.stderr)
            self.flush()
        except Exception:
            self.handleError(record)


def _to_level(level, fallback):
    if isinstance(level, str):
        return getattr(logging, level.upper(), fallback)
    return level


def configure_logger(general_level='WARNING', audit_level=None, silenced_loggers=None, capture_warnings=True):
    """
    Installs a single tqdm-aware handler on the root logger.

    Args:
        general_level: Root level, as a name ('WARNING') or number.
        audit_level: Level for the 'seo_auditor' loggers only, e.g. 'INFO' to
            see per-page "Processing" notices without third-party chatter.
        silenced_loggers: Optional {logger_name: level}; unknown level names
            fall back to CRITICAL.
        capture_warnings: Route `warnings.warn` output (bs4 emits these for
            odd markup) through logging, so it lands on the same handler.
    """
    handler = LogWithTqdm()
    handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(levelname)s - [%(name)s:%(lineno)d] - %(message)s"
    ))

    root_logger = logging.getLogger()
    root_logger.setLevel(_to_level(general_level, logging.WARNING))
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    if audit_level is not None:
        logging.getLogger(AUDIT_LOGGER).setLevel(_to_level(audit_level, logging.INFO))

    for name, level in (silenced_loggers or {}).items():
        logging.getLogger(name).setLevel(_to_level(level, logging.CRITICAL))

    logging.captureWarnings(capture_warnings)
