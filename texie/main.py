"""Entry point — wires Config → TexieCloudService and annotates image files."""
import argparse
import asyncio
import logging
import sys
from pathlib import Path

from rich.logging import RichHandler

from texie.config import Config
from texie.constants import (
    CLI_DESCRIPTION,
    CLI_PROG,
    CLI_RESULT_ERROR,
    CLI_RESULT_TEXT,
    CLI_RESULT_URL,
    MSG_IMAGE_READ_FAILED,
    MSG_STARTING,
)
from texie.imaging import ImagePreparationError, prepare_image
from texie.models import AnnotationResult
from texie.service import TexieCloudService
from texie.token_store import JsonFileTokenStorage

logger = logging.getLogger(__name__)


def _setup_logging(level: str) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    list(map(root.removeHandler, root.handlers[:]))
    root.addHandler(RichHandler(rich_tracebacks=True))


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog=CLI_PROG, description=CLI_DESCRIPTION)
    parser.add_argument("images", nargs="+", type=Path, help="image files to annotate")
    parser.add_argument(
        "--no-store",
        dest="store",
        action="store_false",
        help="ask the service not to keep the image and result",
    )
    return parser.parse_args(argv)


async def run(config: Config, images: list[Path], store: bool, service: TexieCloudService) -> int:
    service.configure(config.client_id, config.client_secret)

    match await service.authenticate():
        case str():
            pass
        case error:
            print(CLI_RESULT_ERROR % (CLI_PROG, error), file=sys.stderr)
            return 1

    failures = 0
    for path in images:
        try:
            payload = prepare_image(path.read_bytes(), config.image_width, config.jpeg_quality)
        except (OSError, ImagePreparationError) as exc:
            logger.error(MSG_IMAGE_READ_FAILED, path, exc)
            failures += 1
            continue

        match await service.annotate(payload, store=store):
            case AnnotationResult(recognized_text=text, stored_image_url=url):
                print(CLI_RESULT_TEXT % (path, text))
                if url is not None:
                    print(CLI_RESULT_URL % (service.image_url(url) or url))
            case error:
                print(CLI_RESULT_ERROR % (path, error), file=sys.stderr)
                failures += 1

    return 1 if failures else 0


async def _main(config: Config, args: argparse.Namespace) -> int:
    async with TexieCloudService(storage=JsonFileTokenStorage(config.token_path)) as service:
        return await run(config, args.images, args.store, service)


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    config = Config.from_env()
    _setup_logging(config.log_level)

    logger.info(MSG_STARTING)
    sys.exit(asyncio.run(_main(config, args)))


if __name__ == "__main__":
    main()
