"""2D geometric primitives: points, edges, lines, rects, and arcs."""

from .point import Point, difference_rotation, clipped_rotation, circle_points
from .edge import Edge, LinearLine, RayCrossing
from .rect import Rect
from .arc import Arc
