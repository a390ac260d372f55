import typing as t

import sentry_sdk

from rsaid.util.config import RsaIdSettings


class SentrySettings(RsaIdSettings):
    environment: t.Optional[str] = "dev"
    commit_tag: str = "dev"
    sentry_dsn: t.Optional[str] = None


sentry_settings = SentrySettings()


def init(ignore_exceptions: t.Sequence[t.Type[Exception]] = ()) -> None:
    """
    Initialize sentry if `APP_SENTRY_DSN` is set; call before doing any real work.

    :param ignore_exceptions: Exception types that are expected outcomes and should not be reported.
    """
    if not sentry_settings.sentry_dsn:
        return

    def sentry_before_send(event: t.Any, hint: t.Any) -> t.Any:
        exc_info = hint.get("exc_info")
        if exc_info and isinstance(exc_info[1], tuple(ignore_exceptions)):
            return None
        return event

    sentry_sdk.init(
        dsn=sentry_settings.sentry_dsn,
        environment=sentry_settings.environment,
        release=sentry_settings.commit_tag,
        traces_sample_rate=0,
        before_send=sentry_before_send,
    )
