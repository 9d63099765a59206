from . import seed

__all__ = ["seed"]
