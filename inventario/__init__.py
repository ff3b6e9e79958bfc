"""Desktop inventory of components stored in SQLite, with CSV and PDF reports."""

__version__ = "0.1.0"
__all__ = ["__version__"]