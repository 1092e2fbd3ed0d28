"""finpatterns: creational design patterns illustrated with finance examples."""

__version__ = "0.1.0"
