# renderer/output.py
import os

import numpy as np
from PIL import Image


def save_image(image: np.ndarray, path: str) -> str:
    """
    Write an RGB frame to disk. The format follows the file extension.

    Args:
        image: (height, width, 3) uint8 array
        path: Destination file

    Returns:
        The path that was written

    Raises:
        FileNotFoundError: If the destination directory doesn't exist
        ValueError: If Pillow cannot encode the image to that format
    """
    directory = os.path.dirname(os.path.abspath(path))
    if not os.path.isdir(directory):
        raise FileNotFoundError(f"Output directory not found: {directory}")

    try:
        Image.fromarray(np.ascontiguousarray(image, dtype=np.uint8)).save(path)
    except (KeyError, ValueError, OSError) as e:
        raise ValueError(f"Error saving image {path}: {str(e)}") from e
    return path
