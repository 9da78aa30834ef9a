"""Outcome of handling a beacon request."""

from pydantic import BaseModel, ConfigDict

from ga_beacon.domain.models.forward_result import ForwardResult
from ga_beacon.domain.models.image_choice import ImageChoice
from ga_beacon.domain.models.path_resolution import PathResolution
from ga_beacon.domain.models.visitor_identity import VisitorIdentity


class BeaconResult(BaseModel):
    """What the web layer needs to render the always-200 image response."""

    model_config = ConfigDict(frozen=True)

    identity: VisitorIdentity
    path: PathResolution
    forward: ForwardResult
    image: ImageChoice
