"""
Application Layer for the Pushup Tracker.

This package contains:
- ports/: Abstract repository interfaces (what the domain needs)
- exceptions.py: Errors shared by the application and infrastructure layers
"""
