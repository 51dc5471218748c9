"""MGNREGA dashboard map path generator.

Converts GeoJSON district and state boundaries into SVG path strings
using a fixed-center Mercator projection, off the caller's thread,
behind a one-request/one-response message contract.
"""

__version__ = "0.1.0"
