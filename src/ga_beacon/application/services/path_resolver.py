"""Page path resolution."""

from ga_beacon.domain.models import PathResolution

REFERER_MISSING = "referer requested but absent"
EXPLICIT_PATH_MISSING = "no explicit path supplied"


class PathResolver:
    """Decides which page path a hit logs.

    With ``use_referer`` the ``Referer`` header is the path; otherwise the
    trailing URL path is. There is no fallback from one to the other.
    """

    def resolve(
        self, use_referer: bool, referer: str | None, explicit_path: str | None
    ) -> PathResolution:
        if use_referer:
            if not referer:
                return PathResolution.failure(REFERER_MISSING)
            return PathResolution.success(referer)

        if not explicit_path:
            return PathResolution.failure(EXPLICIT_PATH_MISSING)
        return PathResolution.success(explicit_path)
