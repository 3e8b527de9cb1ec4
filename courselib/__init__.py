"""Teaching helpers: queues, priority queues, lexicons, strings, console input, geometry and random numbers."""

__version__ = "0.1.0"