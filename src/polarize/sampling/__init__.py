"""
どこで: `polarize.sampling` パッケージ。
何を: 角度走査・フィボナッチ格子・螺旋・線分・台形則積分を公開する。
"""

from .integral import integrate, integrate_volume
from .interpolator import (
    cartesian45,
    cartesian90,
    cartesian180,
    cartesian270,
    cartesian360,
    cartesian_set,
    polar_set,
    polar_set45,
    polar_set90,
    polar_set180,
    polar_set270,
    polar_set360,
    spherical_set,
    spherical_unit45,
    spherical_unit90,
    spherical_unit180,
    spherical_unit270,
    spherical_unit360,
)
from .lattice import fibonacci_lattice, fibonacci_lattice_array
from .line import draw_line
from .spiral import ArchimedeanSpiral, Helix, archimedean_spiral, helix

__all__ = [
    "integrate",
    "integrate_volume",
    "cartesian_set",
    "polar_set",
    "spherical_set",
    "cartesian45",
    "cartesian90",
    "cartesian180",
    "cartesian270",
    "cartesian360",
    "polar_set45",
    "polar_set90",
    "polar_set180",
    "polar_set270",
    "polar_set360",
    "spherical_unit45",
    "spherical_unit90",
    "spherical_unit180",
    "spherical_unit270",
    "spherical_unit360",
    "fibonacci_lattice",
    "fibonacci_lattice_array",
    "draw_line",
    "ArchimedeanSpiral",
    "Helix",
    "archimedean_spiral",
    "helix",
]
