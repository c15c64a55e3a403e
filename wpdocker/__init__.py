"""
WordPress Docker Setup — scaffold a Nginx + PHP-FPM + MySQL WordPress stack.
"""

__version__ = "0.1.0"
