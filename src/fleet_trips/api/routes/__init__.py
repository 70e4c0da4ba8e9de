from . import trips, vehicles

__all__ = ["trips", "vehicles"]
