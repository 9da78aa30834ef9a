"""Web adapters for serving the tracking beacon."""

from ga_beacon.adapters.web.starlette_app import StarletteWebAdapter, create_app

__all__ = ["StarletteWebAdapter", "create_app"]
