"""
Static asset mirroring into the output directory.
"""

import logging
import os
import shutil
from pathlib import Path
from typing import List

from services.errors import AssetCopyError

logger = logging.getLogger(__name__)


def copy_static(src: Path, dst: Path) -> List[Path]:
    """
    Recursively copy the static asset tree at src into dst.

    File bytes and permission bits are preserved; directories are created
    on demand. The first failure aborts the copy and is raised as
    AssetCopyError. Files copied before the failure are left in place.

    Args:
        src: Static asset source directory
        dst: Destination root (usually the output directory)

    Returns:
        Destination paths of every copied file, in traversal order
    """
    src = Path(src)
    dst = Path(dst)

    if not src.is_dir():
        logger.warning(f"Static directory not found, skipping assets: {src}")
        return []

    copied: List[Path] = []

    def _raise(error: OSError):
        raise AssetCopyError(Path(error.filename or src), error) from error

    for dirpath, dirnames, filenames in os.walk(src, onerror=_raise):
        dirnames.sort()
        current = Path(dirpath)
        target_dir = dst / current.relative_to(src)

        try:
            target_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise AssetCopyError(current, e) from e

        for name in sorted(filenames):
            source = current / name
            target = target_dir / name
            try:
                shutil.copyfile(source, target)
                shutil.copymode(source, target)
            except OSError as e:
                raise AssetCopyError(source, e) from e
            logger.debug(f"Copied {source} -> {target}")
            copied.append(target)

    logger.info(f"✓ Copied {len(copied)} static assets from {src}")
    return copied
