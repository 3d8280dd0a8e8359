"""Rendering of laid-out clouds to images."""

from .visualizer import CloudVisualizer

__all__ = ["CloudVisualizer"]
