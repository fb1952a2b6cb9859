"""
NoteMark Backend - note rendering for the editor preview and public note views.
"""

__version__ = "1.0.0"
