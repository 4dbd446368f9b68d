"""Survey route planning, OBJ model loading, simulation state and window helpers for 3D airspace flights."""

__version__ = "0.1.0"

__all__ = ["bounds", "geometry", "model", "route_planner", "window", "workspace"]