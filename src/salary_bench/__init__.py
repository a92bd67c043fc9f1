"""Latest-salary-per-employee query benchmark."""

__version__ = "1.0.0"
