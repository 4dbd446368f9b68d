import pytest

from airspace3d.geometry import convex_hull, point_in_polygon, rotate_about, segment_in_polygon
from airspace3d.route_planner import (
    FlightPattern,
    Route,
    RouteDrawMode,
    RoutePlanner,
    scan_line_path,
    spiral_path,
)
from airspace3d.workspace import AnimationManager, FlightManager, WindowManager

SQUARE = [(0.0, 0.0, 0.0), (20.0, 0.0, 0.0), (20.0, 20.0, 0.0), (0.0, 20.0, 0.0)]
BIG_SQUARE = [(-50.0, -50.0, 0.0), (50.0, -50.0, 0.0), (50.0, 50.0, 0.0), (-50.0, 50.0, 0.0)]
EPS = 1e-6


def _planner_with_points(points, **kwargs):
    planner = RoutePlanner(**kwargs)
    planner.create_control_point()
    for p in points:
        planner.add_control_point(p)
    return planner


def test_scan_line_path_is_flat_and_within_area():
    path = scan_line_path(SQUARE, 10.0, 50.0)
    assert path
    assert all(p[2] == 50.0 for p in path)
    assert all(-EPS <= p[0] <= 20.0 + EPS and -EPS <= p[1] <= 20.0 + EPS for p in path)


def test_scan_line_path_covers_area_extent():
    path = scan_line_path(SQUARE, 10.0, 50.0)
    ys = [p[1] for p in path]
    xs = [p[0] for p in path]
    assert min(ys) == pytest.approx(0.0)
    assert max(ys) == pytest.approx(20.0)
    assert min(xs) == pytest.approx(0.0)
    assert max(xs) == pytest.approx(20.0)


def test_scan_line_path_passes_are_connected():
    path = scan_line_path(SQUARE, 10.0, 50.0)
    assert (len(path) - 2) % 4 == 0
    for i in range(1, len(path) - 1, 2):
        assert path[i] == path[i + 1]


def test_scan_line_path_alternates_direction():
    path = scan_line_path(SQUARE, 5.0, 10.0)
    directions = [path[i + 1][0] - path[i][0] for i in range(0, len(path), 4)]
    assert len(directions) >= 3
    for a, b in zip(directions, directions[1:]):
        assert a * b < 0


def test_scan_line_path_on_tilted_area_stays_near_hull():
    tilted = [(x, y, 0.0) for x, y in rotate_about(BIG_SQUARE, (0.0, 0.0), 30)]
    path = scan_line_path(tilted, 10.0, 20.0)
    assert path
    lows = [min(p[i] for p in tilted) for i in range(2)]
    highs = [max(p[i] for p in tilted) for i in range(2)]
    for p in path:
        assert lows[0] - EPS <= p[0] <= highs[0] + EPS
        assert lows[1] - EPS <= p[1] <= highs[1] + EPS


def test_scan_line_path_short_hull_is_empty():
    assert scan_line_path(SQUARE[:2], 10.0, 50.0) == []


def test_scan_line_path_rejects_non_positive_spacing():
    with pytest.raises(ValueError):
        scan_line_path(SQUARE, 0.0, 50.0)


def test_spiral_path_stays_inside_hull():
    path = spiral_path(BIG_SQUARE, 10.0, 30.0)
    assert path
    assert all(p[2] == 30.0 for p in path)
    assert all(point_in_polygon(p, BIG_SQUARE) for p in path)
    for a, b in zip(path, path[1:]):
        assert segment_in_polygon(a, b, BIG_SQUARE)


def test_spiral_path_short_hull_and_bad_spacing():
    assert spiral_path(SQUARE[:2], 10.0, 30.0) == []
    with pytest.raises(ValueError):
        spiral_path(SQUARE, -1.0, 30.0)


def test_create_control_point_starts_editing_and_clears_points():
    window = WindowManager()
    planner = RoutePlanner(window=window)
    planner.add_control_point((1.0, 2.0, 3.0))
    planner.create_control_point()
    assert window.editing is True
    assert planner.drawing_points == []


def test_add_control_point_records_point_and_mode():
    planner = RoutePlanner()
    planner.add_control_point((1.0, 2.0, 3.0))
    assert planner.drawing_points == [(1.0, 2.0, 3.0)]
    assert planner.draw_mode is RouteDrawMode.ADDING_CONTROL_POINTS


def test_create_route_builds_scanline_route():
    flight = FlightManager(base_height=40.0)
    planner = _planner_with_points(SQUARE + [(5.0, 5.0, 0.0)], flight=flight)
    route = planner.create_route()
    assert isinstance(route, Route)
    assert planner.routes == [route]
    assert planner.route_index == 0
    assert planner.draw_mode is RouteDrawMode.PREVIEWING_ROUTE
    assert planner.drawing_points == []
    assert planner.home_point() == SQUARE[0]
    assert route.convex_hull == convex_hull(SQUARE + [(5.0, 5.0, 0.0)])
    assert planner.route_path() == scan_line_path(route.convex_hull, 10.0, 40.0)


def test_create_route_without_points_fails():
    with pytest.raises(ValueError):
        RoutePlanner().create_route()


def test_home_point_without_route_fails():
    planner = RoutePlanner()
    with pytest.raises(LookupError):
        planner.home_point()
    with pytest.raises(LookupError):
        planner.route_path()


def test_spiral_pattern_flies_at_aircraft_altitude():
    flight = FlightManager(position=(0.0, 0.0, 30.0))
    planner = _planner_with_points(BIG_SQUARE, flight=flight)
    planner.pattern = FlightPattern.SPIRAL
    route = planner.create_route()
    assert route.pattern is FlightPattern.SPIRAL
    assert route.path
    assert all(p[2] == 30.0 for p in route.path)


def test_tour_pattern_gives_no_path():
    planner = RoutePlanner()
    path = planner.generate_route_path(SQUARE, SQUARE[0], SQUARE, FlightPattern.TOUR)
    assert path == []
    assert planner.draw_mode is RouteDrawMode.CREATING_ROUTE_PATH


def test_edit_route_replaces_routes():
    planner = _planner_with_points(SQUARE)
    planner.create_route()
    for p in SQUARE:
        planner.add_control_point(p)
    planner.edit_route()
    assert len(planner.routes) == 1
    assert planner.route_index == 0


def test_clean_routes_forgets_everything():
    planner = _planner_with_points(SQUARE)
    planner.create_route()
    planner.add_control_point((1.0, 1.0, 1.0))
    planner.clean_routes()
    assert planner.routes == []
    assert planner.drawing_points == []


def test_animation_follows_planned_route():
    flight = FlightManager(manual_mode=False)
    planner = _planner_with_points(SQUARE, flight=flight)
    planner.create_route()
    animation = AnimationManager()
    assert animation.start_simulation(planner, flight) is True
    assert animation.path == planner.route_path()
    assert animation.camera_position == planner.home_point()