"""Building blocks for a DMR gateway: FEC codecs, slot types, DMRD packets, an MMDVM link, rules, reflectors, remote control and logging."""

__version__ = "0.1.0"