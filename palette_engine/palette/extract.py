import logging

import numpy as np
from PIL import Image
from sklearn.cluster import KMeans

from ..color import hex_to_rgb, rgb_to_hex, round_half_up, srgb_to_oklab
from ..config import CSS_MATCH_THRESHOLD_SQ, DEFAULT_PRESET_COUNT

logger = logging.getLogger(__name__)

THUMBNAIL_SIZE = (300, 300)


def _load_pixels(image):
    if not isinstance(image, Image.Image):
        image = Image.open(image)
    image = image.convert("RGBA")
    image.thumbnail(THUMBNAIL_SIZE)
    pixels = np.array(image).reshape(-1, 4)
    # Fully transparent pixels carry no visible color
    return pixels[pixels[:, 3] > 0][:, :3]


def extract_colors(image, count=DEFAULT_PRESET_COUNT, random_state=42):
    """Extract dominant colors using k-means clustering

    Args:
        image: Path, file object or PIL image
        count: Maximum number of colors to return
        random_state: Seed for k-means, so extraction is deterministic

    Returns:
        list: Hex colors, most dominant first. Near-duplicates are merged, so
        fewer than ``count`` colors may come back.
    """
    pixels = _load_pixels(image)
    if len(pixels) == 0 or count <= 0:
        return []

    n_clusters = min(count, len(np.unique(pixels, axis=0)))
    kmeans = KMeans(n_clusters=n_clusters, random_state=random_state, n_init=10)
    labels = kmeans.fit_predict(pixels.astype(float))
    sizes = np.bincount(labels, minlength=n_clusters)
    logger.debug("Clustered %d pixels into %d colors", len(pixels), n_clusters)

    colors = []
    kept_labs = []
    for i in np.argsort(-sizes, kind="stable"):
        center = kmeans.cluster_centers_[i]
        hex_color = rgb_to_hex(*(round_half_up(float(c)) for c in center))
        lab = srgb_to_oklab(hex_to_rgb(hex_color))
        if any(float(np.sum((lab - other) ** 2)) < CSS_MATCH_THRESHOLD_SQ for other in kept_labs):
            continue
        kept_labs.append(lab)
        colors.append(hex_color)
    return colors
