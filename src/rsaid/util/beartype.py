import os

from rsaid.util.config import RsaIdSettings


class BearSettings(RsaIdSettings):
    use_beartype: bool = False


def maybe_setup_beartype(packages: list[str] = ["rsaid.service"]) -> None:
    """
    Type-check the given packages at runtime with beartype. Always on under pytest, otherwise only when
    APP_USE_BEARTYPE is true.

    Must run before the packages are first imported.
    """
    if os.environ.get("PYTEST_VERSION") is not None or BearSettings().use_beartype:
        from beartype.claw import beartype_packages

        beartype_packages(packages)
