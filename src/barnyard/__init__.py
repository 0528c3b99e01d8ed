"""Barnyard: balanced allocation of animals to color-partitioned barns."""

__version__ = "0.1.0"
