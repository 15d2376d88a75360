"""
dotpager - overflow-aware page indicator dots for Textual applications
"""

__version__ = "0.1.0"
