"""pathshell - a minimal interactive shell with PATH-based command resolution"""

__version__ = "0.1.0"
