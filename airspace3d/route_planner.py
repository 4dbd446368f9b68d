"""Planning of survey routes over an area given by control points."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable, Optional, Sequence

from .bounds import Vec3
from .geometry import (
    bounding_rect,
    convex_hull,
    optimal_rotation,
    rotate_about,
    scan_intersections,
    segment_in_polygon,
)
from .workspace import FlightManager, WindowManager

log = logging.getLogger(__name__)

# Upper bound on spiral steps; a spiral whose turns keep hitting the hull
# boundary would otherwise never finish.
_MAX_SPIRAL_STEPS = 20_000


class FlightPattern(Enum):
    SCANLINE = auto()
    SPIRAL = auto()
    TOUR = auto()


class RouteDrawMode(Enum):
    AVAILABLE = auto()
    ADDING_CONTROL_POINTS = auto()
    CREATING_CONTROL_POINTS = auto()
    CREATING_CONVEX_HULL = auto()
    CREATING_ROUTE_PATH = auto()
    CREATING_HOME_POINT = auto()
    EDITING_ROUTE_PATH = auto()
    EDITING_CONTROL_POINTS = auto()
    EDITING_CONVEX_HULL = auto()
    EDITING_HOME_POINT = auto()
    PREVIEWING_ROUTE = auto()


@dataclass
class Route:
    """A planned route: its control points, hull, path and home point."""

    pattern: FlightPattern
    turn_radius: float
    scan_spacing: float
    control_points: list[Vec3] = field(default_factory=list)
    convex_hull: list[Vec3] = field(default_factory=list)
    path: list[Vec3] = field(default_factory=list)
    home_point: Vec3 = (0.0, 0.0, 0.0)


def _vec3(point: Sequence[float]) -> Vec3:
    coords = [float(c) for c in point]
    coords += [0.0] * (3 - len(coords))
    return (coords[0], coords[1], coords[2])


def _check_spacing(spacing: float) -> None:
    if spacing <= 0:
        raise ValueError(f"scan spacing must be positive, got {spacing}")


def scan_line_path(hull: Sequence[Sequence[float]], spacing: float, height: float) -> list[Vec3]:
    """Sweep parallel lines ``spacing`` apart across ``hull`` at ``height``.

    The sweep runs along the orientation with the smallest bounding box and
    alternates direction; passes are joined by connecting segments, so the
    path is a list of segment end points taken in pairs.
    """
    if len(hull) < 3:
        return []
    _check_spacing(spacing)
    height = float(height)
    left, top, right, bottom = bounding_rect(hull)
    center = ((left + right) / 2.0, (top + bottom) / 2.0)
    angle = optimal_rotation(hull)
    rotated = rotate_about(hull, center, -angle)
    r_left, r_top, r_right, r_bottom = bounding_rect(rotated)

    path: list[Vec3] = []
    reverse = False
    last_end: Optional[Vec3] = None
    y = r_top
    while y <= r_bottom:
        hits = scan_intersections((r_left - 10, y), (r_right + 10, y), rotated)
        if len(hits) >= 2:
            if reverse:
                hits.reverse()
            (sx, sy), (ex, ey) = rotate_about([hits[0], hits[-1]], center, angle)
            start = (sx, sy, height)
            end = (ex, ey, height)
            if path:
                path.extend((last_end, start))
            path.extend((start, end))
            last_end = end
            reverse = not reverse
        y += spacing
    return path


def spiral_path(hull: Sequence[Sequence[float]], spacing: float, height: float) -> list[Vec3]:
    """Walk an outward spiral from the hull centroid at ``height``.

    Steps that would leave the hull are dropped and pull the radius back in.
    """
    if len(hull) < 3:
        return []
    _check_spacing(spacing)
    height = float(height)
    points = [_vec3(p) for p in hull]
    count = len(points)
    centroid = (
        sum(p[0] for p in points) / count,
        sum(p[1] for p in points) / count,
        height,
    )
    max_distance = max(math.dist(p, centroid) for p in points)

    step = spacing * 0.8
    angle_step = 0.1
    radius = 0.0
    theta = 0.0
    last_valid = centroid
    path: list[Vec3] = []
    for _ in range(_MAX_SPIRAL_STEPS):
        if radius >= 1000.0:
            break
        radius += step * angle_step / (2 * math.pi)
        theta += angle_step
        current = (
            centroid[0] + radius * math.cos(theta),
            centroid[1] + radius * math.sin(theta),
            height,
        )
        if segment_in_polygon(last_valid, current, points):
            path.append(current)
            last_valid = current
        else:
            radius -= step * 0.5
        if radius > max_distance * 2:
            break
    return path


class RoutePlanner:
    """Collects control points and turns them into planned routes."""

    def __init__(
        self,
        flight: Optional[FlightManager] = None,
        window: Optional[WindowManager] = None,
    ) -> None:
        self.flight = flight if flight is not None else FlightManager()
        self.window = window if window is not None else WindowManager()
        self.pattern = FlightPattern.SCANLINE
        self.scan_spacing = 10.0
        self.turn_radius = 5.0
        self.draw_mode = RouteDrawMode.AVAILABLE
        self.routes: list[Route] = []
        self._drawing_points: list[Vec3] = []

    @property
    def drawing_points(self) -> list[Vec3]:
        """Control points gathered for the route being drawn."""
        return list(self._drawing_points)

    @property
    def route_index(self) -> int:
        """Index of the current route, -1 when none has been planned."""
        return len(self.routes) - 1

    def create_control_point(self) -> None:
        """Enter editing mode and start a fresh set of control points."""
        self.window.editing = True
        self._drawing_points.clear()

    def add_control_point(self, point: Sequence[float]) -> None:
        self.draw_mode = RouteDrawMode.ADDING_CONTROL_POINTS
        vec = _vec3(point)
        log.info("add control point %s, %s, %s", vec[0], vec[1], self.flight.base_height)
        self._drawing_points.append(vec)

    def create_route(self) -> Route:
        """Plan a route over the gathered control points and keep it.

        The first control point becomes the home point. Raises ValueError when
        no control points have been added.
        """
        if not self._drawing_points:
            raise ValueError("no control points to plan a route from")
        control_points = list(self._drawing_points)
        home = control_points[0]
        self.draw_mode = RouteDrawMode.CREATING_CONVEX_HULL
        hull = convex_hull(control_points)
        path = self.generate_route_path(control_points, home, hull, self.pattern)
        route = Route(
            pattern=self.pattern,
            turn_radius=self.turn_radius,
            scan_spacing=self.scan_spacing,
            control_points=control_points,
            convex_hull=hull,
            path=path,
            home_point=home,
        )
        self._drawing_points.clear()
        self.routes.append(route)
        self.draw_mode = RouteDrawMode.PREVIEWING_ROUTE
        return route

    def edit_route(self) -> Route:
        """Drop all routes and plan again from the gathered control points."""
        self.draw_mode = RouteDrawMode.EDITING_ROUTE_PATH
        self.routes.clear()
        return self.create_route()

    def clean_routes(self) -> None:
        self.routes.clear()
        self._drawing_points.clear()

    def _current_route(self) -> Route:
        if not self.routes:
            raise LookupError("no route has been planned")
        return self.routes[-1]

    def home_point(self) -> Vec3:
        return self._current_route().home_point

    def route_path(self) -> list[Vec3]:
        return list(self._current_route().path)

    def generate_route_path(
        self,
        control_points: Iterable[Sequence[float]],
        home: Sequence[float],
        hull: Sequence[Sequence[float]],
        pattern: FlightPattern,
    ) -> list[Vec3]:
        """Return the flight path over ``hull`` for ``pattern``.

        Scan lines fly at the base height, spirals at the aircraft's current
        altitude; the tour pattern yields no path.
        """
        self.draw_mode = RouteDrawMode.CREATING_ROUTE_PATH
        if pattern is FlightPattern.SCANLINE:
            return scan_line_path(hull, self.scan_spacing, self.flight.base_height)
        if pattern is FlightPattern.SPIRAL:
            return spiral_path(hull, self.scan_spacing, self.flight.position[2])
        return []