from .partition import make_labels, make_slope, make_triangle, make_triangles

__all__ = ["make_slope", "make_triangle", "make_triangles", "make_labels"]
