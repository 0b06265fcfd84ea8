"""Measurement input adapters."""

from bodytrend.data.measurement_loader import MeasurementLoader, load_measurements

__all__ = ["MeasurementLoader", "load_measurements"]
