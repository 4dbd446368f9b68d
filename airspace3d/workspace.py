"""Shared state of the simulation workspace: environment, flight, paths,
animation and window input."""

from __future__ import annotations

import logging
import os
import random
import sys
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from pathlib import Path
from typing import ClassVar, Optional, Union

from .bounds import Bounds, Vec3

log = logging.getLogger(__name__)


def home_directory() -> str:
    """Return the user's home directory from the environment, or ""."""
    variable = "USERPROFILE" if sys.platform.startswith("win") else "HOME"
    return os.environ.get(variable, "")


class CanvasType(Enum):
    THREE_D = 0
    TWO_D = 1


class WeatherType(IntEnum):
    SUNNY = 0
    CLOUDY = 1
    RAINY = 2
    SNOWY = 3
    FOGGY = 4


WEATHER_NAMES = ("Sunny", "Cloudy", "Rainy", "Snowy", "Foggy")


@dataclass
class EnvManager:
    """Current weather, temperature (°C) and pressure (hPa)."""

    MIN_TEMPERATURE: ClassVar[int] = -50
    MAX_TEMPERATURE: ClassVar[int] = 50
    MIN_PRESSURE: ClassVar[int] = 800
    MAX_PRESSURE: ClassVar[int] = 1100

    weather: WeatherType = WeatherType.SUNNY
    temperature: float = 25.0
    pressure: float = 1013.25

    def weather_string(self) -> str:
        return WEATHER_NAMES[self.weather]

    def generate_random_weather(self, rng: Optional[random.Random] = None) -> None:
        """Pick a random weather, temperature and pressure within the limits.

        Temperature and pressure are drawn in steps of 0.1 from the half-open
        ranges given by the class limits.
        """
        log.info("generate random weather data")
        source = random if rng is None else rng
        self.weather = WeatherType(source.randrange(len(WeatherType)))
        self.temperature = (
            source.randrange(self.MIN_TEMPERATURE * 10, self.MAX_TEMPERATURE * 10) / 10.0
        )
        self.pressure = (
            source.randrange(self.MIN_PRESSURE * 10, self.MAX_PRESSURE * 10) / 10.0
        )


@dataclass
class FlightManager:
    """Parameters of the simulated aircraft."""

    MIN_FLIGHT_SPEED: ClassVar[int] = 1
    MAX_FLIGHT_SPEED: ClassVar[int] = 50
    MIN_FLIGHT_ALTITUDE: ClassVar[int] = 50
    MAX_FLIGHT_ALTITUDE: ClassVar[int] = 1000
    MIN_FLIGHT_BATTERY: ClassVar[int] = 0
    MAX_FLIGHT_BATTERY: ClassVar[int] = 100
    MIN_BASE_HEIGHT: ClassVar[int] = 0
    MAX_BASE_HEIGHT: ClassVar[int] = 100

    speed: float = 10.0
    battery: float = 100.0
    base_height: float = 100.0
    max_altitude: float = float(MAX_BASE_HEIGHT)
    manual_mode: bool = True
    position: Vec3 = (0.0, 0.0, 0.0)
    home_position: Vec3 = (0.0, 0.0, 0.0)
    flight_path: list[Vec3] = field(default_factory=list)

    def query_flight_parameters(self) -> str:
        """Return a human-readable summary of the current flight state."""
        x, y, z = self.position
        return (
            "Current Flight Parameters:\n"
            f"Speed: {self.speed:.1f} m/s\n"
            f"Altitude: {z:.1f} m\n"
            f"Battery: {self.battery:.1f}%\n"
            f"Position:\n ({x:.4f}, {y:.4f})"
        )


@dataclass
class PathManager:
    """Root directory for models and the known OBJ/texture pairs."""

    root_dir: str = field(default_factory=home_directory)
    obj_texture_pairs: list[tuple[str, str]] = field(default_factory=list)

    def add_obj_texture_pair(self, obj_path: str, texture_path: str) -> None:
        self.obj_texture_pairs.append((obj_path, texture_path))

    def obj_texture_pair(self, index: int) -> tuple[str, str]:
        if not 0 <= index < len(self.obj_texture_pairs):
            raise IndexError("Index out of range")
        return self.obj_texture_pairs[index]

    def find_obj_and_texture_paths(self) -> tuple[list[str], list[str]]:
        """List the ``*.obj`` and ``*.jpg`` file names in the root directory."""
        names = sorted(p.name for p in Path(self.root_dir).iterdir() if p.is_file())
        objs = [name for name in names if name.lower().endswith(".obj")]
        textures = [name for name in names if name.lower().endswith(".jpg")]
        return objs, textures


@dataclass
class AnimationManager:
    """Playback state of a flight along a planned route."""

    speed: float = 0.1
    is_animating: bool = False
    is_paused: bool = False
    progress: float = 0.0
    path_index: int = 0
    path: list[Vec3] = field(default_factory=list)
    camera_position: Optional[Vec3] = None

    def start_simulation(self, planner, flight: FlightManager) -> bool:
        """Start flying the planner's current route from its home point.

        Returns False, leaving the state untouched, when the aircraft is in
        manual mode.
        """
        if flight.manual_mode:
            log.warning("Cannot start simulation in manual mode")
            return False
        self.is_animating = True
        self.is_paused = False
        self.progress = 0.0
        self.path_index = 0
        self.path = list(planner.route_path())
        self.camera_position = planner.home_point()
        return True

    def pause_simulation(self) -> None:
        self.is_paused = True

    def resume_simulation(self) -> None:
        self.is_paused = False

    def return_to_home(self, planner) -> None:
        self.progress = 0.0
        self.is_animating = False
        self.is_paused = False
        self.path_index = 0
        self.camera_position = planner.home_point()

    def stop_simulation(self) -> None:
        self.is_animating = False
        self.is_paused = False
        self.progress = 0.0


class Movement(Enum):
    FORWARD = "forward"
    BACKWARD = "backward"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    RESET = "reset"


MOVE_STEP = 0.5

_MOVEMENT_KEYS = (
    (ord("W"), Movement.FORWARD),
    (ord("S"), Movement.BACKWARD),
    (ord("A"), Movement.LEFT),
    (ord("D"), Movement.RIGHT),
    (ord("Q"), Movement.UP),
    (ord("E"), Movement.DOWN),
    (ord("R"), Movement.RESET),
)


def _key_code(key: Union[int, str]) -> int:
    if isinstance(key, str):
        if len(key) != 1:
            raise ValueError(f"expected a single character key, got {key!r}")
        return ord(key.upper())
    return int(key)


@dataclass
class WindowManager:
    """Active canvas, scene bounds, edit mode and held keys."""

    current_canvas: CanvasType = CanvasType.THREE_D
    bounds: Bounds = field(default_factory=Bounds)
    editing: bool = False
    _key_states: dict[int, bool] = field(default_factory=dict, init=False, repr=False)

    def key_press(self, key: Union[int, str]) -> None:
        self._key_states[_key_code(key)] = True

    def key_release(self, key: Union[int, str]) -> None:
        self._key_states[_key_code(key)] = False

    def is_key_pressed(self, key: Union[int, str]) -> bool:
        return self._key_states.get(_key_code(key), False)

    def pressed_movements(self) -> list[Movement]:
        """Camera movements requested by the held keys, each of MOVE_STEP.

        Only the 3D canvas moves with the keyboard.
        """
        if self.current_canvas is not CanvasType.THREE_D:
            return []
        return [move for code, move in _MOVEMENT_KEYS if self.is_key_pressed(code)]