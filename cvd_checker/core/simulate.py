"""Colour-vision deficiency simulation.

Applies a 3x3 dichromacy matrix (after Machado et al. 2009, severity 1.0,
with the short-wave row simplified) to the RGB triple of a colour.
Coefficients are stored in thousandths so the product is exact integer
arithmetic; floor division then discards the fractional part instead of
rounding it.

Every matrix row sums to 1000, so greys (black and white included) map to
themselves. Alpha is carried through untouched.
"""

from __future__ import annotations

import numpy as np

from cvd_checker.core.types import Colour, Deficiency

SCALE = 1000

_MATRICES: dict[Deficiency, np.ndarray] = {
    Deficiency.PROTANOPIA: np.array(
        [
            [152, 1053, -205],
            [115, 786, 99],
            [0, 46, 954],
        ],
        dtype=np.int64,
    ),
    Deficiency.DEUTERANOPIA: np.array(
        [
            [367, 861, -228],
            [280, 673, 47],
            [0, 142, 858],
        ],
        dtype=np.int64,
    ),
    Deficiency.TRITANOPIA: np.array(
        [
            [1256, -77, -179],
            [-78, 931, 147],
            [0, 280, 720],
        ],
        dtype=np.int64,
    ),
}


def matrix_for(deficiency: Deficiency | str) -> np.ndarray:
    """Return a copy of the integer coefficient matrix (thousandths) for a deficiency."""
    return _MATRICES[Deficiency.parse(deficiency)].copy()


def simulate(colour: Colour, deficiency: Deficiency | str | None) -> Colour:
    """Return how `colour` appears to a viewer with `deficiency`.

    None means normal vision and returns the colour unchanged.
    """
    if deficiency is None:
        return colour
    matrix = _MATRICES[Deficiency.parse(deficiency)]
    rgb = np.array(colour.rgb, dtype=np.int64)
    out = np.clip((matrix @ rgb) // SCALE, 0, 255)
    return Colour(int(out[0]), int(out[1]), int(out[2]), colour.alpha)
