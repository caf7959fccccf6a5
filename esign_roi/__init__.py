"""E-signature ROI calculator: cost model, ROI metrics and persistence collaborators."""

__version__ = "0.1.0"
