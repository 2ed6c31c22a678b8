import argparse
import logging
import sys
from typing import Optional, Sequence

from geom2d import (
    Circle,
    CircleIntersection,
    GeometryInputError,
    Line,
    Projection,
    Ray,
    Segment,
    Vector2,
    closest_point_on_circle,
    closest_point_on_line,
    closest_point_on_ray,
    closest_point_on_segment,
    configure_logging,
    distance_to_circle,
    intersect_line_circle,
    intersect_line_line,
    intersect_point_circle,
    intersect_ray_circle,
)

logger = logging.getLogger(__name__)


def _parse_vector(value: str) -> Vector2:
    parts = [part.strip() for part in value.split(",")]
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"expected 'x,y', got {value!r}")
    try:
        return Vector2.of([float(part) for part in parts])
    except (ValueError, GeometryInputError) as exc:
        raise argparse.ArgumentTypeError(f"invalid coordinate {value!r}: {exc}") from exc


def _format_vector(vec: Vector2) -> str:
    return f"({vec.x:.6f}, {vec.y:.6f})"


def _print_projection(projection: Projection, point: Vector2) -> None:
    print(f"Closest point: {_format_vector(projection.point)}")
    print(f"Projected x: {projection.projected_x:.6f}")
    print(f"Distance: {point.distance(projection.point):.6f}")


def _print_circle_intersection(result: CircleIntersection) -> int:
    print(f"Success: {result.success}")
    if not result.success:
        return 1
    print(f"Point A: {_format_vector(result.point_a)}")
    print(f"Point B: {_format_vector(result.point_b)}")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Evaluate 2D geometry queries")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("line", "Project a point onto an infinite line"),
        ("ray", "Project a point onto a ray"),
    ):
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument("--point", type=_parse_vector, required=True)
        sub.add_argument("--origin", type=_parse_vector, required=True)
        sub.add_argument("--direction", type=_parse_vector, required=True)

    sub = commands.add_parser("segment", help="Project a point onto a segment")
    sub.add_argument("--point", type=_parse_vector, required=True)
    sub.add_argument("--a", type=_parse_vector, required=True)
    sub.add_argument("--b", type=_parse_vector, required=True)

    sub = commands.add_parser("circle", help="Relate a point to a circle")
    sub.add_argument("--point", type=_parse_vector, required=True)
    sub.add_argument("--center", type=_parse_vector, required=True)
    sub.add_argument("--radius", type=float, required=True)

    sub = commands.add_parser("line-line", help="Intersect two lines")
    sub.add_argument("--origin-a", type=_parse_vector, required=True)
    sub.add_argument("--direction-a", type=_parse_vector, required=True)
    sub.add_argument("--origin-b", type=_parse_vector, required=True)
    sub.add_argument("--direction-b", type=_parse_vector, required=True)

    for name, help_text in (
        ("line-circle", "Intersect a line with a circle (unit direction)"),
        ("ray-circle", "Intersect a ray with a circle (unit direction)"),
    ):
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument("--origin", type=_parse_vector, required=True)
        sub.add_argument("--direction", type=_parse_vector, required=True)
        sub.add_argument("--center", type=_parse_vector, required=True)
        sub.add_argument("--radius", type=float, required=True)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    logger.info("Running %s query", args.command)

    if args.command == "line":
        _print_projection(closest_point_on_line(args.point, Line(args.origin, args.direction)), args.point)
        return 0

    if args.command == "ray":
        _print_projection(closest_point_on_ray(args.point, Ray(args.origin, args.direction)), args.point)
        return 0

    if args.command == "segment":
        _print_projection(closest_point_on_segment(args.point, Segment(args.a, args.b)), args.point)
        return 0

    if args.command == "circle":
        circle = Circle(args.center, args.radius)
        print(f"Signed distance: {distance_to_circle(args.point, circle):.6f}")
        print(f"Closest offset: {_format_vector(closest_point_on_circle(args.point, circle))}")
        print(f"Inside: {intersect_point_circle(args.point, circle)}")
        return 0

    if args.command == "line-line":
        result = intersect_line_line(
            Line(args.origin_a, args.direction_a),
            Line(args.origin_b, args.direction_b),
        )
        print(f"Success: {result.success}")
        if not result.success:
            return 1
        print(f"Intersection: {_format_vector(result.point)}")
        return 0

    circle = Circle(args.center, args.radius)
    if args.command == "line-circle":
        return _print_circle_intersection(intersect_line_circle(Line(args.origin, args.direction), circle))
    return _print_circle_intersection(intersect_ray_circle(Ray(args.origin, args.direction), circle))


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
