# accessnav/navigation/exceptions.py

class NavigationError(Exception):
    """Base exception for all navigation-core errors"""
    pass
