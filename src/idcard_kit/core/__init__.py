"""Checksum, field decomposition and upgrade primitives."""
