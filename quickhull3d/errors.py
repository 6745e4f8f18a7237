"""
Винятки побудови оболонки.

InsufficientInputError і DegenerateInputError — це проблеми вхідних даних
(тому вони ще й ValueError, як у старому API). InternalInconsistencyError —
порушення інваріантів half-edge сітки, тобто дефект алгоритму.
"""
from __future__ import annotations


class HullError(Exception):
    """Базовий виняток пакета."""


class InsufficientInputError(HullError, ValueError):
    pass


class DegenerateInputError(HullError, ValueError):
    """
    Стартовий симплекс не будується: точки збігаються, колінеарні або
    копланарні в межах допуску. `kind` — яка саме перевірка спрацювала.
    """

    COINCIDENT = "coincident"
    COLINEAR = "colinear"
    COPLANAR = "coplanar"

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"Input points appear to be {kind}")


class InternalInconsistencyError(HullError, RuntimeError):
    pass
