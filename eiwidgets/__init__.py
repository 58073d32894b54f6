"""Core of a small widget toolkit: value types, rectangle geometry, surfaces, widget trees and placement."""

__version__ = "3.1.0"