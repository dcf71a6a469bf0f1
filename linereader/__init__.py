"""Line-at-a-time reading from file descriptors with a fixed-size read buffer."""

__version__ = "0.1.0"
__all__ = ["reader", "multi"]