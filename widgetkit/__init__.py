"""Creational design pattern demos built around platform UI widgets."""

__version__ = "0.1.0"
