"""Autosteer controller building blocks: NMEA parsing, running averages, CAN frames and ADS1115 access."""

__version__ = "0.1.0"
__all__ = ["nmea", "running_average", "canframe", "ads1115"]