"""
Perceptual color distance: CIELAB conversion and CIEDE2000.
"""

import itertools

import numpy as np

# sRGB (D65) to XYZ
_RGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
])
_D65_WHITE = np.array([95.047, 100.000, 108.883])


def _as_rgb_array(colors):
    """Accept Color objects or raw (r, g, b) rows and return an (N, 3) array."""
    rows = [getattr(c, "rgb", c) for c in colors]
    return np.asarray(rows, dtype=float).reshape(-1, 3)


def rgb_to_xyz(rgb):
    """Convert RGB (0-255) rows to XYZ (0-100)."""
    channels = np.asarray(rgb, dtype=float) / 255.0
    linear = np.where(
        channels <= 0.04045,
        channels / 12.92,
        ((channels + 0.055) / 1.055) ** 2.4,
    )
    return linear @ _RGB_TO_XYZ.T * 100.0


def xyz_to_lab(xyz):
    """Convert XYZ rows to CIELAB."""
    ratio = np.asarray(xyz, dtype=float) / _D65_WHITE
    delta = 6 / 29
    f = np.where(ratio > delta ** 3, np.cbrt(ratio), ratio / (3 * delta ** 2) + 4 / 29)
    fx, fy, fz = f[..., 0], f[..., 1], f[..., 2]
    return np.stack([116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)], axis=-1)


def rgb_to_lab(rgb):
    """Convert RGB (0-255) to CIELAB."""
    return xyz_to_lab(rgb_to_xyz(rgb))


def delta_e_cie2000(lab1, lab2):
    """CIEDE2000 color difference between two CIELAB colors."""
    L1, a1, b1 = lab1
    L2, a2, b2 = lab2

    C_bar = (np.hypot(a1, b1) + np.hypot(a2, b2)) / 2
    G = 0.5 * (1 - np.sqrt(C_bar ** 7 / (C_bar ** 7 + 25 ** 7)))
    a1p, a2p = a1 * (1 + G), a2 * (1 + G)
    C1p, C2p = np.hypot(a1p, b1), np.hypot(a2p, b2)
    h1p = np.arctan2(b1, a1p) % (2 * np.pi)
    h2p = np.arctan2(b2, a2p) % (2 * np.pi)

    dLp = L2 - L1
    dCp = C2p - C1p
    chroma_product = C1p * C2p
    if chroma_product == 0:
        dhp = 0.0
        h_bar = h1p + h2p
    else:
        dhp = h2p - h1p
        if dhp > np.pi:
            dhp -= 2 * np.pi
        elif dhp < -np.pi:
            dhp += 2 * np.pi
        h_bar = (h1p + h2p) / 2
        if abs(h1p - h2p) > np.pi:
            h_bar += np.pi if h1p + h2p < 2 * np.pi else -np.pi
    dHp = 2 * np.sqrt(chroma_product) * np.sin(dhp / 2)

    L_bar = (L1 + L2) / 2
    C_bar_p = (C1p + C2p) / 2
    T = (1
         - 0.17 * np.cos(h_bar - np.radians(30))
         + 0.24 * np.cos(2 * h_bar)
         + 0.32 * np.cos(3 * h_bar + np.radians(6))
         - 0.20 * np.cos(4 * h_bar - np.radians(63)))
    d_theta = np.radians(30) * np.exp(-((np.degrees(h_bar) - 275) / 25) ** 2)
    R_C = 2 * np.sqrt(C_bar_p ** 7 / (C_bar_p ** 7 + 25 ** 7))
    S_L = 1 + 0.015 * (L_bar - 50) ** 2 / np.sqrt(20 + (L_bar - 50) ** 2)
    S_C = 1 + 0.045 * C_bar_p
    S_H = 1 + 0.015 * C_bar_p * T
    R_T = -np.sin(2 * d_theta) * R_C

    return float(np.sqrt(
        (dLp / S_L) ** 2
        + (dCp / S_C) ** 2
        + (dHp / S_H) ** 2
        + R_T * (dCp / S_C) * (dHp / S_H)
    ))


def distance_matrix(colors):
    """Symmetric matrix of pairwise CIEDE2000 distances."""
    labs = rgb_to_lab(_as_rgb_array(colors))
    n = len(labs)
    matrix = np.zeros((n, n))
    for i, j in itertools.combinations(range(n), 2):
        matrix[i, j] = matrix[j, i] = delta_e_cie2000(labs[i], labs[j])
    return matrix


def min_pairwise_distance(colors):
    """Smallest CIEDE2000 distance between any two colors (inf for < 2)."""
    colors = list(colors)
    if len(colors) < 2:
        return float("inf")
    matrix = distance_matrix(colors)
    return float(matrix[np.triu_indices(len(colors), k=1)].min())
