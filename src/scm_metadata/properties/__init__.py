"""Property naming and building."""

from scm_metadata.properties.builder import build_properties, sorted_properties
from scm_metadata.properties.naming import PropertyNameCalculator, calculate_property_name

__all__ = [
    "PropertyNameCalculator",
    "calculate_property_name",
    "build_properties",
    "sorted_properties",
]
