from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Credentials:
    client_id: str
    client_secret: str


@dataclass(frozen=True)
class AnnotationResult:
    recognized_text: str
    stored_image_url: Optional[str] = None
