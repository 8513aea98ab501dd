"""A terminal system monitor for CPU, memory, swap and GPU usage."""

__version__ = "0.1.0"