"""
up_functions: out-of-process function providers for the UP template engine.
"""

__version__ = "0.1.0"
