"""Caller-side image preparation: orientation fix, optional resize, JPEG encode."""
import io
import logging
from typing import Optional

from PIL import Image, ImageOps, UnidentifiedImageError

from texie.constants import DEFAULT_IMAGE_WIDTH, DEFAULT_JPEG_QUALITY

logger = logging.getLogger(__name__)


class ImagePreparationError(ValueError):
    pass


def resize_to_width(image: Image.Image, width: float = DEFAULT_IMAGE_WIDTH) -> Image.Image:
    """Scale proportionally so the result is `width` pixels wide."""
    scale = width / image.width
    size = (max(1, round(image.width * scale)), max(1, round(image.height * scale)))
    return image.resize(size, Image.Resampling.LANCZOS)


def prepare_image(
    data: bytes,
    width: Optional[float] = None,
    quality: int = DEFAULT_JPEG_QUALITY,
) -> bytes:
    try:
        with Image.open(io.BytesIO(data)) as opened:
            image = ImageOps.exif_transpose(opened).convert("RGB")
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as exc:
        raise ImagePreparationError(f"cannot decode image: {exc}") from exc

    match width:
        case None:
            pass
        case w:
            image = resize_to_width(image, w)

    out = io.BytesIO()
    image.save(out, format="JPEG", quality=quality)
    logger.debug("Prepared %dx%d JPEG (%d bytes)", image.width, image.height, out.tell())
    return out.getvalue()
