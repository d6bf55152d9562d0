from .order import Matrix, refines_or_equal, ordering_matrix, is_unit_upper_triangular
from .solve import mobius_column

__all__ = [
    "Matrix",
    "refines_or_equal",
    "ordering_matrix",
    "is_unit_upper_triangular",
    "mobius_column",
]
