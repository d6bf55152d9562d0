"""
chrompoly: chromatic polynomials of small simple graphs via the lattice of
contractions and its Mobius function, with a cancellable background worker
for interactive graph editors.
"""

from .lattice import (
    GraphSnapshot,
    Partition,
    StopCheck,
    from_graph,
    contract_edge,
    direct_contractions,
    build_lattice,
)
from .mobius import refines_or_equal, ordering_matrix, mobius_column
from .polynomial import assemble_polynomial, evaluate_polynomial, polynomial_to_text
from .pipeline import (
    ChromaticResult,
    compute_chromatic,
    chromatic_polynomial,
    chromatic_polynomial_nx,
    chromatic_polynomial_g6,
)
from .io.graph6 import g6_to_nx, g6_to_snapshot, nx_to_snapshot
from .compute import Coordinator, Phase, Progress, SharedGraph
from .viz.draw import draw_lattice

__all__ = [
    # Lattice
    "GraphSnapshot",
    "Partition",
    "StopCheck",
    "from_graph",
    "contract_edge",
    "direct_contractions",
    "build_lattice",
    # Mobius
    "refines_or_equal",
    "ordering_matrix",
    "mobius_column",
    # Polynomial
    "assemble_polynomial",
    "evaluate_polynomial",
    "polynomial_to_text",
    # Pipeline
    "ChromaticResult",
    "compute_chromatic",
    "chromatic_polynomial",
    "chromatic_polynomial_nx",
    "chromatic_polynomial_g6",
    # IO
    "g6_to_nx",
    "g6_to_snapshot",
    "nx_to_snapshot",
    # Background computation
    "Coordinator",
    "Phase",
    "Progress",
    "SharedGraph",
    # Viz
    "draw_lattice",
]
