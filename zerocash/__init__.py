"""Zero cash date calculator: when does a drawn-down portfolio run out?"""

__version__ = "0.1.0"
