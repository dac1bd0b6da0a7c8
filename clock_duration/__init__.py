"""
Calcolo della durata tra due orari in formato 12 ore (AM/PM).
"""

__version__ = "1.0"
