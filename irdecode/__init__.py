"""Decode infrared remote-control signals (Sony SIRC-12, JVC, NEC) from edge timings."""

__version__ = "0.1.0"