from dataclasses import dataclass, field


@dataclass(frozen=True)
class UploadCandidate:
    """A selected file awaiting acceptance and encoding."""

    raw_bytes: bytes = field(repr=False)
    declared_media_type: str
    size_bytes: int
    original_name: str


@dataclass(frozen=True)
class EncodedDocument:
    """Inline transport payload for the model API."""

    data: str = field(repr=False)
    media_type: str
    sha256: str
    original_name: str
    size_bytes: int

    def as_data_url(self) -> str:
        return f"data:{self.media_type};base64,{self.data}"

    @property
    def is_image(self) -> bool:
        return self.media_type.startswith("image/")
