"""Vehicle inventory service for the car dealer API."""

__version__ = "0.1.0"
