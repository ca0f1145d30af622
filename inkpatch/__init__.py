"""
inkpatch: pixel and color routines for e-reader UI patches.
Rounded corners for covers, screen border correction, and an HSV color wheel picker.
"""
__version__ = "0.1.0"
