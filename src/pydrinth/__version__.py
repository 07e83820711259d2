"""
Auto-generated file. DO NOT EDIT.
"""
__version__ = "0.2.0"
__author__ = "Tomyatana"
