from .fence import FenceMarker
from .line import Line

__all__ = ["FenceMarker", "Line"]
