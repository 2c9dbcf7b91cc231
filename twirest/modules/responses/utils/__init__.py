from .helpers import to_bool, to_datetime, to_decimal, to_int

__all__ = ["to_bool", "to_datetime", "to_decimal", "to_int"]
