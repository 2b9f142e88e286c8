from .logger import SimpleLogger

__all__ = ["SimpleLogger"]
