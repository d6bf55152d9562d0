from .draw import draw_lattice
from .layouts import block_label, lattice_to_nx, lattice_layout

__all__ = ["draw_lattice", "block_label", "lattice_to_nx", "lattice_layout"]
