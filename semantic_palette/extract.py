"""Suggest neutral and primary base colors from an image."""

import logging

import numpy as np
from PIL import Image
from sklearn.cluster import KMeans

from .color import rgb_to_hex
from .spaces import hex_to_perceptual

logger = logging.getLogger(__name__)

# Clusters smaller than this share of pixels are ignored when picking the primary
MIN_CLUSTER_SHARE = 0.02


def extract_colors(image_path, n_colors=8):
    """Extract dominant colors using k-means clustering.

    Returns:
        list of (hex, share) tuples, largest cluster first
    """
    img = Image.open(image_path).convert("RGB")
    img.thumbnail((300, 300))
    pixels = np.array(img).reshape(-1, 3)

    # Remove extreme pixels
    mask = (pixels.sum(axis=1) > 30) & (pixels.sum(axis=1) < 735)
    filtered_pixels = pixels[mask]

    if len(filtered_pixels) < n_colors:
        filtered_pixels = pixels

    n_clusters = min(n_colors, len(np.unique(filtered_pixels, axis=0)))
    kmeans = KMeans(n_clusters=n_clusters, random_state=42, n_init=10)
    labels = kmeans.fit_predict(filtered_pixels)
    counts = np.bincount(labels, minlength=n_clusters)

    colors = []
    for center, count in zip(kmeans.cluster_centers_, counts):
        colors.append((rgb_to_hex(*center), count / len(labels)))
    colors.sort(key=lambda c: c[1], reverse=True)
    return colors


def suggest_base_colors(image_path, n_colors=8):
    """Pick a (neutral_hex, primary_hex) pair from an image.

    The primary is the most chromatic cluster that covers a meaningful share
    of the image; the neutral is the least chromatic cluster, preferring
    ones near mid lightness so the scale has room on both sides.
    """
    colors = extract_colors(image_path, n_colors=n_colors)
    measured = [(hex_color, share, hex_to_perceptual(hex_color)) for hex_color, share in colors]

    candidates = [m for m in measured if m[1] >= MIN_CLUSTER_SHARE] or measured
    primary = max(candidates, key=lambda m: m[2].chroma)
    neutral = min(measured, key=lambda m: m[2].chroma + abs(m[2].lightness - 0.55) * 0.1)

    logger.debug(
        "Suggested neutral %s (C=%.3f) and primary %s (C=%.3f) from %s",
        neutral[0],
        neutral[2].chroma,
        primary[0],
        primary[2].chroma,
        image_path,
    )
    return neutral[0], primary[0]
