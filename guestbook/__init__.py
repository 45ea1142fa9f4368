"""
guestbook - Restaurant guest book with reactive list/detail coordinators
"""

__version__ = "0.1.0"
