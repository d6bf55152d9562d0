from .assemble import assemble_polynomial, evaluate_polynomial
from .format import LOADING_TEXT, polynomial_to_text, found_text, processing_text

__all__ = [
    "assemble_polynomial",
    "evaluate_polynomial",
    "LOADING_TEXT",
    "polynomial_to_text",
    "found_text",
    "processing_text",
]
