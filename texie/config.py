from dataclasses import dataclass
from pathlib import Path
from typing import Optional
import os
from dotenv import load_dotenv

from texie.constants import DEFAULT_JPEG_QUALITY, DEFAULT_TOKEN_PATH


@dataclass(frozen=True)
class Config:
    client_id: str
    client_secret: str
    token_path: Path
    image_width: Optional[float]
    jpeg_quality: int
    log_level: str

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        client_id = os.getenv("TEXIE_CLIENT_ID")
        client_secret = os.getenv("TEXIE_CLIENT_SECRET")
        token_path = os.getenv("TEXIE_TOKEN_PATH", DEFAULT_TOKEN_PATH)
        raw_width = os.getenv("TEXIE_IMAGE_WIDTH") or None
        try:
            image_width = float(raw_width) if raw_width else None
        except ValueError:
            raise ValueError("TEXIE_IMAGE_WIDTH must be a number") from None
        jpeg_quality = os.getenv("TEXIE_JPEG_QUALITY", str(DEFAULT_JPEG_QUALITY))
        log_level = os.getenv("LOG_LEVEL", "INFO")

        return cls._validate(
            client_id=client_id,
            client_secret=client_secret,
            token_path=Path(token_path),
            image_width=image_width,
            jpeg_quality=int(jpeg_quality),
            log_level=log_level,
        )

    @staticmethod
    def _validate(
        client_id: Optional[str],
        client_secret: Optional[str],
        token_path: Path,
        image_width: Optional[float],
        jpeg_quality: int,
        log_level: str,
    ) -> "Config":
        match client_id:
            case None | "":
                raise ValueError("TEXIE_CLIENT_ID must be set in .env")
            case _:
                pass

        match client_secret:
            case None | "":
                raise ValueError("TEXIE_CLIENT_SECRET must be set in .env")
            case _:
                pass

        match image_width:
            case None:
                pass
            case w if w > 0:
                pass
            case _:
                raise ValueError("TEXIE_IMAGE_WIDTH must be positive")

        match jpeg_quality:
            case q if 1 <= q <= 95:
                pass
            case _:
                raise ValueError("TEXIE_JPEG_QUALITY must be between 1 and 95")

        return Config(
            client_id=client_id,
            client_secret=client_secret,
            token_path=token_path,
            image_width=image_width,
            jpeg_quality=jpeg_quality,
            log_level=log_level,
        )
