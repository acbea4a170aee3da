"""MIDI messages, sequences, controller mapping, MPE and file import."""