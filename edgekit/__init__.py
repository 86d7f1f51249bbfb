"""Colour, drawing, text, template, shell and command-line helpers for screen-edge widgets."""

__version__ = "0.1.0"