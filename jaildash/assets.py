"""
Packaged static assets (icons, stylesheet).

Lookup order: existence first (AssetNotFound), then content type from the
file extension (AssetTypeUnknown).
"""

import mimetypes
from pathlib import Path
from typing import Tuple

from werkzeug.security import safe_join

from jaildash.errors import AssetNotFound, AssetTypeUnknown

STATIC_ROOT = Path(__file__).resolve().parent / "static"


def resolve_asset(relative_path: str, root: Path = STATIC_ROOT) -> Tuple[Path, str]:
    """
    Map a request path to a file under the static root.

    Returns:
        (absolute path, content type)

    Raises:
        AssetNotFound: Missing file, a directory, or a path escaping the root
        AssetTypeUnknown: No extension, or one mimetypes does not know
    """
    joined = safe_join(str(root), relative_path)
    if joined is None:
        raise AssetNotFound(relative_path)
    path = Path(joined)
    if not path.is_file():
        raise AssetNotFound(relative_path)

    if not path.suffix:
        raise AssetTypeUnknown(f"Could not get file extension: {relative_path}")
    content_type, _ = mimetypes.guess_type(path.name)
    if content_type is None:
        raise AssetTypeUnknown(f"Could not get file content type: {relative_path}")

    return path, content_type
