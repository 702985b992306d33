"""I/O utilities."""

from voxphone.io.export import to_json, write_json

__all__ = ["to_json", "write_json"]
