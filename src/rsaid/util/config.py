import typing as t
from datetime import date

from pydantic import BaseModel  # noqa: F401 For reexporting
from pydantic_settings import BaseSettings, SettingsConfigDict


class RsaIdSettings(BaseSettings):
    model_config = SettingsConfigDict(
        # Pick up variables from the environment with the APP_ prefix stripped
        env_prefix="APP_",
        # Nested models can have individual fields set via APP_OUTER__INNER
        # https://docs.pydantic.dev/latest/usage/settings/#parsing-environment-variable-values
        env_nested_delimiter="__",
        case_sensitive=False,
        # Settings are read once and never mutated, which also makes them hashable
        frozen=True,
    )


class ValidatorSettings(RsaIdSettings):
    # Pin "today" for century disambiguation, eg on a systest box. Unset means the real date.
    reference_date: t.Optional[date] = None
