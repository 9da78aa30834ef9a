"""Response image variants."""

from pydantic import BaseModel, ConfigDict

GIF_CONTENT_TYPE = "image/gif"
SVG_CONTENT_TYPE = "image/svg+xml"


class ImageChoice(BaseModel):
    """A named image variant and the file that backs it."""

    model_config = ConfigDict(frozen=True)

    name: str
    file_name: str

    @property
    def content_type(self) -> str:
        if self.file_name.lower().endswith(".gif"):
            return GIF_CONTENT_TYPE
        return SVG_CONTENT_TYPE


# Order matters: the first variant named in the query wins, the last one is the default.
IMAGE_VARIANTS: tuple[ImageChoice, ...] = (
    ImageChoice(name="pixel", file_name="pixel.gif"),
    ImageChoice(name="gif", file_name="badge.gif"),
    ImageChoice(name="flat", file_name="badge-flat.svg"),
    ImageChoice(name="flat-gif", file_name="badge-flat.gif"),
    ImageChoice(name="badge", file_name="badge.svg"),
)
