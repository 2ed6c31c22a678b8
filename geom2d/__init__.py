from .config import EPSILON, configure_logging
from .vector import GeometryInputError, Vector2, VectorLike
from .primitives import Circle, Line, Ray, Segment
from .results import CircleIntersection, LineIntersection, Projection
from .diagnostics import (
    DegenerateInput,
    DiagnosticCollector,
    DiagnosticSink,
    log_degenerate_input,
)
from .projections import (
    closest_point_on_line,
    closest_point_on_ray,
    closest_point_on_segment,
    distance_to_line,
    distance_to_ray,
    distance_to_segment,
)
from .circles import closest_point_on_circle, distance_to_circle, intersect_point_circle
from .intersections import intersect_line_circle, intersect_line_line, intersect_ray_circle

__all__ = [
    'EPSILON',
    'configure_logging',
    'GeometryInputError',
    'Vector2',
    'VectorLike',
    'Line',
    'Ray',
    'Segment',
    'Circle',
    'Projection',
    'LineIntersection',
    'CircleIntersection',
    'DegenerateInput',
    'DiagnosticCollector',
    'DiagnosticSink',
    'log_degenerate_input',
    'closest_point_on_line',
    'distance_to_line',
    'closest_point_on_ray',
    'distance_to_ray',
    'closest_point_on_segment',
    'distance_to_segment',
    'distance_to_circle',
    'closest_point_on_circle',
    'intersect_point_circle',
    'intersect_line_line',
    'intersect_line_circle',
    'intersect_ray_circle',
]
