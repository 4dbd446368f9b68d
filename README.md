# airspace3d

Planning and state for simulated survey flights over a 3D airspace.

The package has these modules:

- `airspace3d.geometry`: planar geometry on the x/y of points. It has `convex_hull`, `point_in_polygon` (odd-even rule), `segment_intersection`, `segment_in_polygon`, `scan_intersections`, `bounding_rect`, `rotate_about` and `optimal_rotation`.
- `airspace3d.route_planner`: survey routes over the convex hull of control points. It has `RoutePlanner`, `Route`, `FlightPattern` and `RouteDrawMode`, plus the free functions `scan_line_path` and `spiral_path`.
- `airspace3d.model`: reads Wavefront OBJ and MTL files. It has `load_vertices`, `retrieve_mtl_path`, `load_mtl`, `file_size`, the dataclasses `Vertex` and `Material`, and `ModelData`.
- `airspace3d.bounds`: 3D axis-aligned boxes. It has `Bounds` with `merge`, and `bounds_of`.
- `airspace3d.workspace`: simulation state. It has `EnvManager` for weather, temperature and pressure, and `FlightManager` for flight parameters. `PathManager` holds the model root directory and OBJ/texture pairs. `AnimationManager` holds playback state, and `WindowManager` holds the active canvas, edit mode and held keys.
- `airspace3d.window`: main-window helpers. It has `window_size`, `window_position` and `read_user_manual`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Planning a route

```python
from airspace3d.route_planner import RoutePlanner, FlightPattern

planner = RoutePlanner()
planner.create_control_point()
for point in [(0, 0, 0), (100, 0, 0), (100, 60, 0), (0, 60, 0)]:
    planner.add_control_point(point)
route = planner.create_route()

print(planner.home_point())      # the first control point
for waypoint in planner.route_path():
    print(waypoint)
```

`create_route` works in these steps:

1. It takes the convex hull of the gathered control points.
2. It makes the first control point the home point.
3. It builds a path for `planner.pattern`.

The `SCANLINE` pattern gives parallel passes `planner.scan_spacing` apart at the flight's base height. The passes alternate direction and are joined by connecting segments. The `SPIRAL` pattern gives an outward spiral from the hull centroid at the aircraft's current altitude. The `TOUR` pattern gives no path.

`create_route` raises `ValueError` when no control points have been added. `home_point()` and `route_path()` raise `LookupError` before any route exists.

You can also generate paths straight from a hull:

```python
from airspace3d.geometry import convex_hull
from airspace3d.route_planner import scan_line_path, spiral_path

hull = convex_hull([(0, 0, 0), (50, 0, 0), (50, 30, 0), (0, 30, 0)])
lines = scan_line_path(hull, spacing=10.0, height=100.0)
spiral = spiral_path(hull, spacing=10.0, height=100.0)
```

A spacing that is not positive raises `ValueError`.

## Loading a model

```python
from airspace3d.model import ModelData

model = ModelData("aircraft.obj")
print(len(model.vertices), model.material.diffuse, model.texture_path)
print(model.calculate_bounds(), model.calculate_center())
```

The OBJ file is read as follows:

- Only the first three corners of each face are used.
- The material comes from the file named by the first `mtllib` line.
- When there is no such line, or the MTL file cannot be opened, the default `Material` is kept.

## Flight and environment state

```python
import random
from airspace3d.workspace import EnvManager, FlightManager

print(FlightManager().query_flight_parameters())

env = EnvManager()
env.generate_random_weather(random.Random(42))
print(env.weather_string(), env.temperature, env.pressure)
```

`AnimationManager.start_simulation(planner, flight)` starts playback of the planner's current route from its home point. It returns `False` and leaves the state as it was when `flight.manual_mode` is set.

`WindowManager.pressed_movements()` returns the camera `Movement`s for the held W/S/A/D/Q/E/R keys. It returns them only while the 3D canvas is active.

## Window helpers

```python
from airspace3d.window import window_size, window_position, read_user_manual

width, height = window_size(1920, 1080)             # 80% of the screen, clamped
x, y = window_position(1920, 1080, width, height)   # centred
text = read_user_manual("resources")                # user_manual.txt + copyright.txt
```

## What this package does not do

The package has no graphical window, no 3D rendering and no command-line program. It computes routes, loads meshes and keeps simulation state.

Nothing draws them or moves a camera. `AnimationManager` only records a camera position, and `WindowManager` only reports the movements that the held keys ask for.