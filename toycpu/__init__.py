"""A tiny four-instruction processor simulator with byte-addressed memory."""

__version__ = "0.1.0"
__all__ = ["isa", "memory", "processor", "simulation"]