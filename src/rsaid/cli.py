"""
rsa-id-validate: check a South African ID number from the command line.

    $ rsa-id-validate "900101 4800 085"
    {"valid":true,"id_number":"9001014800085","date_of_birth":"1990-01-01",...}

Exits 0 for a valid number, 1 for an invalid one and 2 for bad arguments.
"""

import logging
import sys
import typing as t
from datetime import date

from pydantic_settings import CliPositionalArg

from rsaid.service.id import validate
from rsaid.util.argparse import PydanticArguments
from rsaid.util.cmd import run

logger = logging.getLogger(__name__)


class ValidateArguments(PydanticArguments):
    id_number: CliPositionalArg[str]
    reference_date: t.Optional[date] = None

    def cli_cmd(self) -> None:
        result = validate(self.id_number, self.reference_date)
        print(result.model_dump_json())
        if not result.valid:
            logger.info("Rejected: %s", result.error)
            self._exit_code = 1


def main() -> None:
    sys.exit(run(ValidateArguments.run))


if __name__ == "__main__":
    main()
