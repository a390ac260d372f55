"Tools for running rsaid command-line processes"

import typing as t

from rsaid.service.id import InvalidIDNumber
from rsaid.util.logging import setup_logging
from rsaid.util.sentry import init as setup_sentry

Res = t.TypeVar("Res", bound=None | int)


def setup() -> None:
    # A rejected ID number is an expected outcome, not something to report
    setup_sentry(ignore_exceptions=[InvalidIDNumber])
    setup_logging()


def run(main: t.Callable[[], Res]) -> Res:
    """
    Set up standard error reporting and logging, then call `main` returning its result if any.
    """
    setup()
    return main()
