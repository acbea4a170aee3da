"""Building blocks of a digital audio workstation: engine, MIDI, state, remote control and plugin sync."""

__version__ = "0.1.0"