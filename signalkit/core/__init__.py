"""
Core package of signalkit.
"""
