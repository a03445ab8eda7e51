"""
Signboard - Digital signage announcement workflow

Directors request announcements, designers produce the artwork and
schedule how long it is shown, and an unattended display rotates through
everything that has been published.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
