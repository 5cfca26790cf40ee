"""Storing uploaded files under UPLOAD_DIR."""

import logging
import os
import random
import shutil
import time
from typing import BinaryIO

logger = logging.getLogger(__name__)

RANDOM_SUFFIX_MAX = 1_000_000_000


def build_stored_filename(original: str) -> str:
    """{epoch millis}-{random}-{basename}; the basename strips any client-supplied directories."""
    basename = os.path.basename(original.replace("\\", "/")) or "file"
    millis = int(time.time() * 1000)
    return f"{millis}-{random.randint(0, RANDOM_SUFFIX_MAX)}-{basename}"


def store_upload(source: BinaryIO, original_filename: str, upload_dir: str) -> tuple[str, str]:
    """Copy the stream into upload_dir (created on demand); returns (filename, path)."""
    os.makedirs(upload_dir, exist_ok=True)
    filename = build_stored_filename(original_filename)
    path = os.path.join(upload_dir, filename)
    with open(path, "wb") as out:
        shutil.copyfileobj(source, out)
    logger.info("Stored upload %s", path)
    return filename, path
