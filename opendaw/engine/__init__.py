"""Audio engine parts: synthesis, metronome, delay compensation, WAV loading and time stretching."""