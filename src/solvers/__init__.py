"""Solvers — прямые и итерационные методы решения систем Ax = b.

- Прямые: метод Гаусса, Гаусса-Жордана, LU-разложение
- Итерационные: метод Гаусса-Зейделя
"""

from .direct import gauss_elimination, gauss_jordan, lu_decompose, lu_factorization
from .iterative import GaussSeidelConfig, gauss_seidel, is_diagonally_dominant

__all__ = [
    "gauss_elimination",
    "gauss_jordan",
    "lu_decompose",
    "lu_factorization",
    "GaussSeidelConfig",
    "gauss_seidel",
    "is_diagonally_dominant",
]
