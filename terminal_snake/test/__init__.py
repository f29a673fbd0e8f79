"""
Testing Module for Terminal Snake
"""
