"""structlog configuration for rubyfilter.

Records from ``rubyfilter.*`` loggers go to one stderr handler on the
package logger. The root logger is left to the embedding application.

Levels:
- ``-v``: DEBUG for the package, including commands the scanner rejects and
  each malformed ruby command the event pipeline meets.
- default: WARNING. Malformed-command warnings from the pipeline are held
  back because the CLI already reports them from ``ServiceResult.warnings``.
- ``-q``: ERROR.

Output is colored console lines, or JSON lines with ``--log-json``.
"""

from __future__ import annotations

import logging
import sys

import structlog

PACKAGE_LOGGER = "rubyfilter"
PIPELINE_LOGGER = "rubyfilter.pipeline.filter"

_HANDLER_NAME = "rubyfilter-stderr"


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer(ensure_ascii=False)
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def _package_level(*, verbose: bool, quiet: bool) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    return logging.WARNING


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    log_json: bool = False,
) -> logging.Handler:
    """Route ``rubyfilter`` logging through structlog to stderr.

    Calling it again replaces the handler installed by the previous call.
    Returns the installed handler.
    """
    shared = _shared_processors()
    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in package_logger.handlers[:]:
        if existing.get_name() == _HANDLER_NAME:
            package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.propagate = False
    package_logger.setLevel(_package_level(verbose=verbose, quiet=quiet))

    # NOTSET defers to the package level.
    pipeline_level = logging.NOTSET if verbose else logging.ERROR
    logging.getLogger(PIPELINE_LOGGER).setLevel(pipeline_level)
    return handler
