# opendaw

Building blocks for a small digital audio workstation, as a plain Python
library. It has no GUI and opens no audio or MIDI devices. It works on lists of
float samples, on MIDI bytes and files, and on in-memory project state, so it
can run offline, in tests, or behind any front end.

## What it contains

- `opendaw.engine.synth`: `Oscillator` with sine, square and sawtooth waveforms
  (`Waveform`), shaped by an `AdsrEnvelope` configured with `AdsrParams`.
  `Oscillator.process_add` adds its output to every channel of an interleaved
  buffer.
- `opendaw.engine.metronome`: `Metronome` adds a short decaying click on every
  beat of an interleaved buffer, with a higher-pitched click on the first beat
  of each 4/4 bar.
- `opendaw.engine.pdc`: plugin delay compensation. `RoutingGraph` records each
  node's latency in samples; `PdcEngine.calculate_compensation` works out how
  far each node must be delayed to match the slowest, and
  `PdcEngine.apply_compensation` returns the data with that many silent
  samples in front. Connections between nodes are stored but not followed.
- `opendaw.engine.audio_file`: `load_wav` and `load_wav_from_reader` read
  8/16/24/32-bit integer PCM and 32-bit float WAV data into an `AudioBuffer`
  of interleaved samples normalised to about -1.0..1.0. Unsupported formats
  raise `ValueError`.
- `opendaw.engine.warp`: `TimeStretcher`, which records a time ratio and pitch
  scale; its `process` currently passes audio through unchanged.
- `opendaw.midi.message`: `parse_message` turns raw bytes into `NoteOn`,
  `NoteOff`, `ControlChange`, `PitchBend` or `Unknown`; a note-on with velocity
  0 becomes a `NoteOff`. `MidiEvent.from_bytes` adds a timestamp.
- `opendaw.midi.sequence`: `Sequence` of `NoteEvent`s with ids that are never
  reused, plus move, resize and velocity edits.
- `opendaw.midi.mapping`: `MidiMappingRegistry` for MIDI learn, mapping a
  `MidiCcKey` to a `ParameterId` and normalising CC values to 0..1.
- `opendaw.midi.mpe`: `MpeZone` tracking per-channel `MpeNote` pitch bend,
  pressure and CC74 timbre.
- `opendaw.midi.importer`: `parse_midi_data`, `read_midi_file` and
  `import_midi_as_tracks` read Standard MIDI Files (through `mido`) into
  `Track`/`MidiClip` pairs.
- `opendaw.state`: `DawState` (transport, master settings, tracks, active
  sequence), `Track`, `AudioClip`, `MidiClip`, `FreezeState`, `ProjectState`
  for saving and loading projects as JSON, and `sync_project_state_json` for
  merging project JSON from a backend into a `DawState`.
- `opendaw.mcp`: remote-control commands (`Play`, `Stop`, `ToggleLoop`,
  `AddTrack`, `RemoveTrack`, `SelectTrack`, `ToggleMute`, `ToggleSolo`,
  `ToggleRecordArm`, `ToggleGlobalRecord`, `RequestTrackJson`), a bounded
  channel from `create_mcp_channel`, the async `TransportHandler` and
  `TracksHandler` that send commands into that channel, and `McpServer`
  holding both handlers.
- `opendaw.plugin.ara`: tempo, transport and note sync between a host
  (`AraHostAccess`, with the in-memory `MockDawHost`) and a plugin
  (`AraPluginExtension`, with `VocalSynthAraExtension`).

## Installing

```
pip install .
```

## Examples

```python
from opendaw.engine.synth import Oscillator

osc = Oscillator(44100.0)
osc.frequency = 440.0
osc.set_active(True)
buffer = [0.0] * 8          # 4 stereo frames
osc.process_add(buffer, 2)
```

```python
from opendaw.midi.message import parse_message

print(parse_message([0x90, 60, 100]))  # NoteOn(channel=0, note=60, velocity=100)
print(parse_message([0x90, 60, 0]))    # NoteOff(channel=0, note=60, velocity=0)
```

```python
from opendaw.state.daw import DawState
from opendaw.state.project import ProjectState

state = DawState()
state.add_track("Vocals")
ProjectState(state).save_to_file("song.odaw")
restored = ProjectState.load_from_file("song.odaw")
print(restored.daw_state.tracks[0].name)  # Vocals
```

```python
from opendaw.mcp.commands import Play, create_mcp_channel

sender, receiver = create_mcp_channel(10)
sender.send(Play())
print(receiver.recv())  # Play()
```

## What it does not do

- It has no audio effects (gain, filter, delay) and no mixer: there is nothing
  that sums several tracks with volume, pan, mute and solo into one output
  buffer.
- It cannot render or export a project to a WAV file; WAV files can only be
  read.
- It has no message queue between a user interface and an audio thread, and
  nothing that reads commands from the `opendaw.mcp` channel and applies them
  to a `DawState`; the receiving side must do that itself.
- `McpServer.run` only logs that it is starting; no network protocol is served.
- There is no command-line program, and no audio or MIDI device input or
  output.

## Running the tests

```
pip install ".[test]"
pytest
```