"""In-memory JSON values with UTF-8 checking, equality, copying and number conversion helpers."""

__version__ = "2.11.0"
__all__ = ["strconv", "utf", "value"]