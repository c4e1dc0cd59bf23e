"""
Stylesheet publishing.

Cards only look right when `post-card.css` is served next to the generated
pages; the host build calls `publish_stylesheet` with its output directory.
"""

import shutil
from pathlib import Path
from typing import Optional, Union

from post_card.config import Settings, get_settings, get_service_logger
from post_card.core.exceptions import AssetError

STYLESHEET_NAME = "post-card.css"
STATIC_DIR = Path(__file__).resolve().parent / "static"

logger = get_service_logger("Assets")


def stylesheet_path() -> Path:
    """Location of the packaged stylesheet."""
    return STATIC_DIR / STYLESHEET_NAME


def publish_stylesheet(
    destination: Union[str, Path],
    settings: Optional[Settings] = None,
    source: Optional[Path] = None,
) -> Path:
    """
    Copy the stylesheet into `<destination>/<asset_dir>/post-card.css`.

    Args:
        destination: root of the build output
        settings: provides `asset_dir`
        source: stylesheet to copy, defaults to the packaged one

    Returns:
        Path of the copied file

    Raises:
        AssetError: if the source stylesheet is missing or cannot be copied
    """
    settings = settings or get_settings()
    source = Path(source) if source else stylesheet_path()

    if not source.is_file():
        logger.warning("Stylesheet not found", path=str(source))
        raise AssetError(f"{STYLESHEET_NAME} not found at {source}", context=str(source))

    target_dir = Path(destination) / settings.asset_dir
    target = target_dir / STYLESHEET_NAME
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(source, target)
    except OSError as e:
        raise AssetError(f"Cannot copy stylesheet: {e}", context=str(target)) from e

    logger.info("Stylesheet published", path=str(target))
    return target
