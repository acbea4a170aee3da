import pytest

from opendaw.state.daw import DawState


def test_seek_to():
    state = DawState()
    state.seek_to(-10.0)
    assert state.playhead_pos == 0.0
    state.seek_to(150.0)
    assert state.playhead_pos == 100.0
    state.seek_to(50.0)
    assert state.playhead_pos == 50.0


def test_toggle_playback():
    state = DawState()
    assert not state.is_playing
    state.toggle_playback()
    assert state.is_playing
    state.toggle_playback()
    assert not state.is_playing


def test_toggle_recording():
    state = DawState()
    assert not state.is_recording
    state.toggle_recording()
    assert state.is_recording
    state.toggle_recording()
    assert not state.is_recording


def test_stop_playback():
    state = DawState()
    state.is_playing = True
    state.playhead_pos = 50.0
    state.stop_playback()
    assert not state.is_playing
    assert state.playhead_pos == 0.0


def test_toggle_loop():
    state = DawState()
    assert state.is_looping
    state.toggle_loop()
    assert not state.is_looping
    state.toggle_loop()
    assert state.is_looping


def test_toggle_metronome():
    state = DawState()
    assert not state.is_metronome_enabled
    state.toggle_metronome()
    assert state.is_metronome_enabled
    state.toggle_metronome()
    assert not state.is_metronome_enabled


def test_playback_end_behavior_with_loop():
    state = DawState(is_playing=True, is_looping=True, playhead_pos=100.0)
    state.tick_playback()
    assert state.is_playing
    assert state.playhead_pos == 0.0


def test_playback_end_behavior_without_loop():
    state = DawState(is_playing=True, is_looping=False, playhead_pos=100.0)
    state.tick_playback()
    assert not state.is_playing
    assert state.playhead_pos == 0.0


def test_tick_does_nothing_when_stopped():
    state = DawState(playhead_pos=10.0)
    state.tick_playback()
    assert state.playhead_pos == 10.0


def test_toggle_mute():
    state = DawState()
    assert not state.is_muted
    state.toggle_mute()
    assert state.is_muted
    state.toggle_mute()
    assert not state.is_muted


def test_bpm_affects_playback_speed():
    state120 = DawState(is_playing=True, bpm=120.0)
    state120.tick_playback()
    state240 = DawState(is_playing=True, bpm=240.0)
    state240.tick_playback()
    assert state120.playhead_pos * 2.0 == state240.playhead_pos


def test_add_remove_track():
    state = DawState()
    assert len(state.tracks) == 0

    state.add_track("Track 1")
    assert len(state.tracks) == 1
    assert state.tracks[0].name == "Track 1"
    assert state.tracks[0].id == 1

    state.add_track("Track 2")
    assert len(state.tracks) == 2
    assert state.tracks[1].name == "Track 2"
    assert state.tracks[1].id == 2

    state.remove_track(1)
    assert len(state.tracks) == 1
    assert state.tracks[0].name == "Track 2"
    assert state.tracks[0].id == 2

    state.add_track("Track 3")
    assert len(state.tracks) == 2
    assert state.tracks[1].name == "Track 3"
    assert state.tracks[1].id == 3

    state.remove_track(999)
    assert len(state.tracks) == 2


def test_find_track():
    state = DawState()
    added = state.add_track("Drums")
    assert state.find_track(added.id) is added
    assert state.find_track(42) is None


def test_dawstate_sequence():
    state = DawState()
    assert len(state.active_sequence.notes) == 0
    note_id = state.active_sequence.add_note(60, 100, 0.0, 1.0)
    assert len(state.active_sequence.notes) == 1
    assert note_id == 0
    note = state.active_sequence.get_note(note_id)
    assert note.pitch == 60
    assert note.velocity == 100
    assert note.start_beat == 0.0
    assert note.duration_beats == 1.0


def test_to_dict_omits_transient_state():
    state = DawState(is_playing=True, is_recording=True, playhead_pos=42.0)
    data = state.to_dict()
    assert "is_playing" not in data
    assert "is_recording" not in data
    assert "playhead_pos" not in data


def test_round_trip_resets_transient_state():
    state = DawState(bpm=140.0, master_volume=0.5, is_playing=True, playhead_pos=50.0)
    state.add_track("Test Track")
    state.tracks[0].synth.is_enabled = True
    state.tracks[0].synth.frequency = 880.0
    restored = DawState.from_dict(state.to_dict())
    assert restored.bpm == 140.0
    assert restored.master_volume == 0.5
    assert [t.name for t in restored.tracks] == ["Test Track"]
    assert restored.tracks[0].synth.is_enabled
    assert restored.tracks[0].synth.frequency == 880.0
    assert not restored.is_playing
    assert restored.playhead_pos == 0.0
    assert restored.next_track_id == 2


def test_from_dict_missing_field():
    data = DawState().to_dict()
    del data["bpm"]
    with pytest.raises(ValueError):
        DawState.from_dict(data)