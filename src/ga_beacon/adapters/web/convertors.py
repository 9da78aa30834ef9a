"""URL convertors used by the beacon routes."""

from starlette.convertors import Convertor, register_url_convertor

TRACKING_ID_REGEX = r"UA-\d+-\d+"


class TrackingIdConvertor(Convertor):
    """Matches Universal Analytics property ids such as ``UA-12345-1``.

    Paths with any other segment in the tracking id position do not match
    the beacon route at all.
    """

    regex = TRACKING_ID_REGEX

    def convert(self, value: str) -> str:
        return value

    def to_string(self, value: str) -> str:
        return value


register_url_convertor("tracking_id", TrackingIdConvertor())
