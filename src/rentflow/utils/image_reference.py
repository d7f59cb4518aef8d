"""Turn local image files into embeddable data references."""

import base64
import mimetypes
from pathlib import Path


def image_to_data_uri(path: str | Path) -> str:
    """Read an image file and return a ``data:`` URI for it.

    Raises:
        ValueError: If the file is not recognizable as an image
        OSError: If the file cannot be read
    """
    path = Path(path)
    mime_type, _ = mimetypes.guess_type(path.name)
    if mime_type is None or not mime_type.startswith("image/"):
        raise ValueError(f"'{path.name}' does not look like an image file")
    encoded = base64.b64encode(path.read_bytes()).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"
