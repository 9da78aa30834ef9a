"""Response image selection."""

from ga_beacon.domain.models import IMAGE_VARIANTS, ImageChoice

DEFAULT_VARIANT = "badge"


class ImageSelector:
    """Picks the response image from the query options of a request."""

    def __init__(self, variants: tuple[ImageChoice, ...] = IMAGE_VARIANTS) -> None:
        """Initialize with an ordered variant table that contains the default."""
        self._variants = variants
        self._default = next(v for v in variants if v.name == DEFAULT_VARIANT)

    def select(self, query_options: frozenset[str]) -> ImageChoice:
        """Return the first variant named in ``query_options``, else the badge."""
        options = {option.lower() for option in query_options}
        for variant in self._variants:
            if variant.name in options:
                return variant
        return self._default
