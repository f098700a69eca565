from .config import Config
from .sim import Simulation
from .state import Phase, Snapshot, SurfaceUnavailable

__all__ = ["Config", "Phase", "Simulation", "Snapshot", "SurfaceUnavailable"]
