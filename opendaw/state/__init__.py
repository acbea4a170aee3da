"""Project state: DAW state, tracks, clips, freeze state, persistence and synchronisation."""