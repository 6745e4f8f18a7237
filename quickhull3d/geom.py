from __future__ import annotations
from dataclasses import dataclass
from math import sqrt
import sys
from typing import Iterable, Tuple

# Math.ulp(1.0): відстань від 1.0 до наступного double
MACHINE_EPS = sys.float_info.epsilon


@dataclass(frozen=True)
class Pt:
    x: float
    y: float
    z: float
    def __iter__(self):
        yield self.x; yield self.y; yield self.z


def as_point(p) -> Pt:
    """Pt, кортеж (x, y, z) або рядок numpy -> Pt."""
    if isinstance(p, Pt):
        return p
    x, y, z = p
    return Pt(float(x), float(y), float(z))

def add(a: Pt, b: Pt) -> Pt:
    return Pt(a.x + b.x, a.y + b.y, a.z + b.z)

def sub(a: Pt, b: Pt) -> Pt:
    return Pt(a.x - b.x, a.y - b.y, a.z - b.z)

def scale(a: Pt, s: float) -> Pt:
    return Pt(a.x*s, a.y*s, a.z*s)

def dot(a: Pt, b: Pt) -> float:
    return a.x*b.x + a.y*b.y + a.z*b.z

def cross(a: Pt, b: Pt) -> Pt:
    return Pt(a.y*b.z - a.z*b.y,
              a.z*b.x - a.x*b.z,
              a.x*b.y - a.y*b.x)

def norm_sq(a: Pt) -> float:
    return dot(a, a)

def norm(a: Pt) -> float:
    return sqrt(dot(a, a))

def normalize(a: Pt) -> Pt:
    n = norm(a)
    if n == 0.0:
        raise ZeroDivisionError("cannot normalize a zero vector")
    return scale(a, 1.0 / n)

def distance_sq(a: Pt, b: Pt) -> float:
    return norm_sq(sub(a, b))

def distance(a: Pt, b: Pt) -> float:
    return sqrt(distance_sq(a, b))

def centroid(points: Iterable[Pt]) -> Pt:
    xs = ys = zs = 0.0
    n = 0
    for p in points:
        xs += p.x; ys += p.y; zs += p.z; n += 1
    if n == 0:
        raise ValueError("empty set")
    inv = 1.0 / n
    return Pt(xs*inv, ys*inv, zs*inv)

def unique_points(points: Iterable[Tuple[float, float, float]], scale: float = 1e9) -> list[Pt]:
    """
    Груба дедуплікація з квантуванням (стабільніше для float).
    Порядок перших входжень зберігається, тож індекси детерміновані.
    """
    seen: dict[Tuple[int, int, int], Pt] = {}
    for x, y, z in points:
        key = (int(round(x*scale)), int(round(y*scale)), int(round(z*scale)))
        if key not in seen:
            seen[key] = Pt(float(x), float(y), float(z))
    return list(seen.values())
