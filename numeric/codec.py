"""Encode/decode of kernel values as plain JSON-ready lists.

    Rational  -> [p, q]
    Point     -> [x, y]
    Edge      -> [[x0, y0], [x1, y1]]
    Arc       -> [[cx, cy], radius, start_angle, end_angle]
    Keyframe  -> [value, type, [p, q]]

Decoding validates everything first and raises CorruptData on any problem;
nothing is partially applied.
"""
import json
import logging
import math
from typing import Any, Callable

from geometry.arc import Arc
from geometry.edge import Edge
from geometry.point import Point
from animation.keyframe import Keyframe
from shared.errors import CorruptData
from shared.types import KeyframeType
from .rational import Rational

logger = logging.getLogger(__name__)


def _corrupt(msg: str) -> CorruptData:
    logger.warning("Rejected input: %s", msg)
    return CorruptData(msg)

def _pair(data: Any, what: str) -> tuple[Any, Any]:
    if not isinstance(data, (list, tuple)) or len(data) != 2:
        raise _corrupt(f"{what} must be a pair, got {data!r}")
    return data[0], data[1]

def _finite(v: Any, what: str) -> float:
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        raise _corrupt(f"{what} must be a number, got {v!r}")
    v = float(v)
    if not math.isfinite(v):
        raise _corrupt(f"{what} must be finite, got {v!r}")
    return v


# ============================================================
# Rational
# ============================================================
def encode_rational(r: Rational) -> list[int]:
    return [r.p, r.q]

def decode_rational(data: Any) -> Rational:
    p, q = _pair(data, "Rational")
    if any(isinstance(v, bool) or not isinstance(v, int) for v in (p, q)):
        raise _corrupt(f"Rational components must be integers, got {data!r}")
    if q == 0:
        raise _corrupt("Division by zero")
    return Rational(p, q)


# ============================================================
# Geometry
# ============================================================
def encode_point(p: Point) -> list[float]:
    return [p.x, p.y]

def decode_point(data: Any) -> Point:
    x, y = _pair(data, "Point")
    return Point(_finite(x, "Point.x"), _finite(y, "Point.y"))

def encode_edge(e: Edge) -> list[list[float]]:
    return [encode_point(e.p0), encode_point(e.p1)]

def decode_edge(data: Any) -> Edge:
    p0, p1 = _pair(data, "Edge")
    return Edge(decode_point(p0), decode_point(p1))

def encode_arc(a: Arc) -> list:
    return [encode_point(a.center), a.radius, a.start_angle, a.end_angle]

def decode_arc(data: Any) -> Arc:
    if not isinstance(data, (list, tuple)) or len(data) != 4:
        raise _corrupt(f"Arc must have 4 components, got {data!r}")
    center = decode_point(data[0])
    radius = _finite(data[1], "Arc.radius")
    if radius < 0:
        raise _corrupt(f"Arc.radius must not be negative, got {radius}")
    start = _finite(data[2], "Arc.start_angle")
    end = _finite(data[3], "Arc.end_angle")
    return Arc(center, radius, start, end)


# ============================================================
# Keyframes
# ============================================================
def encode_keyframe(k: Keyframe, encode_value: Callable[[Any], Any] = lambda v: v) -> list:
    return [encode_value(k.value), int(k.type), encode_rational(k.time)]

def decode_keyframe(data: Any, decode_value: Callable[[Any], Any] = lambda v: v) -> Keyframe:
    if not isinstance(data, (list, tuple)) or len(data) != 3:
        raise _corrupt(f"Keyframe must have 3 components, got {data!r}")
    try:
        kind = KeyframeType(data[1])
    except ValueError as e:
        raise _corrupt(f"Unknown keyframe type {data[1]!r}") from e
    time = decode_rational(data[2])
    return Keyframe(decode_value(data[0]), kind, time)


# ============================================================
# JSON text
# ============================================================
def dumps(data: Any) -> str:
    return json.dumps(data, separators=(",", ":"), allow_nan=False)

def loads(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise _corrupt(f"Invalid JSON: {e}") from e
