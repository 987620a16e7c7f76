"""Map number, label and time series onto Cartesian and polar chart geometry."""

__version__ = "0.1.0"