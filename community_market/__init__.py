"""Community Market: marketplace backend with denormalized community listings."""

__version__ = "0.1.0"
