"""
accessnav - Navigation geometry and pilot guidance for an accessible
flight-simulator companion. Computes great-circle distances and bearings,
ILS intercept and visual approach guidance, and maintains the sectioned
flight plan that the speech layer reads back.
"""

__version__ = "0.1.0"
