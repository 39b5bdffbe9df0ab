"""
Utility helpers shared by the container and its loaders.
"""
