"""Rolling-sphere character simulation with a follow camera and vector maths."""

__version__ = "0.1.0"
__all__ = ["camera", "controller", "debug_info", "geometry", "world"]