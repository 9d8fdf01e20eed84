from .data_matrix import DataMatrix, Row

__all__ = ["DataMatrix", "Row"]
