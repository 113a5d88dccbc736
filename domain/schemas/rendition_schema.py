from pydantic import BaseModel

from domain.enums.social_formats import SocialFormat


class RenditionParams(BaseModel):
    public_id: str  # Ej: "social-share-uploads/abc123"
    width: int
    height: int
    aspect_ratio: str  # Ej: "4:5"
    crop: str = "fill"
    gravity: str = "auto"

    @classmethod
    def for_format(cls, public_id: str, fmt: SocialFormat) -> "RenditionParams":
        return cls(
            public_id=public_id,
            width=fmt.width,
            height=fmt.height,
            aspect_ratio=fmt.aspect_ratio,
        )


class RenditionResponse(RenditionParams):
    format: str
    label: str
    url: str


class FormatOut(BaseModel):
    name: str
    label: str
    width: int
    height: int
    aspect_ratio: str
