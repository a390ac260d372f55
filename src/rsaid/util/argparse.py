import argparse

from pydantic import PrivateAttr, ValidationError
from pydantic_settings import CliApp, CliSettingsSource

from rsaid.util.config import RsaIdSettings


class PydanticArguments(RsaIdSettings, cli_parse_args=True, cli_kebab_case=True):
    """
    Command-line arguments declared as pydantic fields. Subclasses implement `cli_cmd` and may set `_exit_code`
    for `run` to return.
    """

    _exit_code: int = PrivateAttr(default=0)

    @classmethod
    def run(cls) -> int:
        css: CliSettingsSource[argparse.ArgumentParser] = CliSettingsSource(cls)
        try:
            args = CliApp.run(cls, cli_settings_source=css)
        except ValidationError as e:
            msg = ""
            for err in e.errors():
                msg += f"\nargument {err['loc'][0]}: {err['msg']}"
            # Exits with status 2 unless parser.exit is overridden
            css.root_parser.error(msg)
            return 2
        return args._exit_code
