"""Stream reader and writer, containers and record codecs for RPG Maker 2000/2003 LCF data."""

__version__ = "0.1.0"