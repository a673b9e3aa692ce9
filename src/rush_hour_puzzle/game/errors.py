class RushHourError(Exception):
    """Base exception class for Rush Hour errors."""
    pass


class LevelError(RushHourError):
    """Raised when level data is malformed or describes an illegal board."""
    pass


class LevelLoadError(LevelError):
    """Raised when a level file cannot be read or decoded."""
    pass


class VehicleNotFound(RushHourError):
    """Raised when a specified vehicle is not on the board."""
    pass
