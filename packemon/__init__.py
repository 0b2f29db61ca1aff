"""Packet building, parsing and checksum helpers for OSPF, UDP, TCP options and captured traffic."""

__version__ = "0.1.0"