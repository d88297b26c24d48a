"""
Drive Icon Randomizer
Gives every fixed drive a random icon made from a folder of pictures.
Icons are registered under HKLM\\...\\Explorer\\DriveIcons.
"""

__version__ = "1.0.0"
