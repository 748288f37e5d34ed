"""Version information for Meeteeor Python SDK"""

__version__ = "3.2.0"
