import pytest

from opendaw.state.clip import AudioClip, MidiClip


def test_audio_clip_new():
    clip = AudioClip(1, "Vocal Take 1", 0.0, 10.5)
    assert clip.id == 1
    assert clip.name == "Vocal Take 1"
    assert clip.start_pos == 0.0
    assert clip.length == 10.5
    assert clip.waveform_summary == []


def test_audio_clip_waveform_summary_in_dict():
    clip = AudioClip(1, "Guitar", 5.0, 2.0)
    clip.waveform_summary = [0.1, 0.5, 0.8, 0.3]
    data = clip.to_dict()
    assert len(data["waveform_summary"]) == 4
    assert data["waveform_summary"][2] == 0.8


def test_midi_clip_new():
    clip = MidiClip(1, "Synth Melody", 0.0, 4.0)
    assert clip.id == 1
    assert clip.name == "Synth Melody"
    assert clip.start_beat == 0.0
    assert clip.length_beats == 4.0
    assert len(clip.sequence.notes) == 0


def test_audio_clip_round_trip():
    clip = AudioClip(3, "Bass", 1.5, 4.0, [0.2, 0.4])
    assert AudioClip.from_dict(clip.to_dict()) == clip


def test_midi_clip_round_trip_keeps_notes_and_ids():
    clip = MidiClip(2, "Lead", 4.0, 8.0)
    clip.sequence.add_note(60, 100, 0.0, 1.0)
    clip.sequence.add_note(64, 90, 1.0, 0.5)
    restored = MidiClip.from_dict(clip.to_dict())
    assert restored == clip
    assert restored.sequence.add_note(67, 80, 2.0, 1.0) == 2


def test_audio_clip_from_dict_missing_field():
    with pytest.raises(ValueError):
        AudioClip.from_dict({"id": 1, "name": "x", "start_pos": 0.0})


def test_audio_clip_from_dict_wrong_type():
    with pytest.raises(ValueError):
        AudioClip.from_dict(
            {"id": 1, "name": "x", "start_pos": "zero", "length": 1.0, "waveform_summary": []}
        )


def test_midi_clip_from_dict_requires_sequence_object():
    with pytest.raises(ValueError):
        MidiClip.from_dict(
            {"id": 1, "name": "x", "start_beat": 0.0, "length_beats": 1.0, "sequence": 5}
        )