"""
storehours - Opening hours and open/closed status for retail locations.
"""

__version__ = "0.1.0"
