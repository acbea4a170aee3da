import pytest

from opendaw.state.clip import AudioClip, MidiClip
from opendaw.state.track import (
    AdsrParams,
    EffectKind,
    EffectSetting,
    EffectType,
    SynthSetting,
    Track,
    TrackType,
    Waveform,
)

GAIN = EffectType(EffectKind.GAIN)
FILTER = EffectType(EffectKind.FILTER)


def test_track_new():
    track = Track(1, "Vocals")
    assert track.id == 1
    assert track.name == "Vocals"
    assert track.volume == 1.0
    assert track.pan == 0.0
    assert not track.is_muted
    assert not track.is_solo
    assert track.effects == []
    assert not track.synth.is_enabled
    assert track.synth.frequency == 440.0
    assert track.track_type is TrackType.NORMAL
    assert not track.vocal_synth.is_enabled
    assert track.clips == []
    assert track.midi_clips == []


def test_track_set_name():
    track = Track(1, "Vocals")
    track.name = "Main Vocals"
    assert track.name == "Main Vocals"


def test_track_set_volume():
    track = Track(1, "Vocals")
    track.volume = 0.5
    assert track.volume == 0.5
    track.volume = -0.5
    assert track.volume == 0.0
    track.volume = 2.0
    assert track.volume == 2.0


def test_track_set_pan():
    track = Track(1, "Vocals")
    track.pan = -0.5
    assert track.pan == -0.5
    track.pan = 0.8
    assert track.pan == 0.8
    track.pan = -2.0
    assert track.pan == -1.0
    track.pan = 1.5
    assert track.pan == 1.0


def test_track_toggle_mute():
    track = Track(1, "Vocals")
    assert not track.is_muted
    track.toggle_mute()
    assert track.is_muted
    track.toggle_mute()
    assert not track.is_muted


def test_track_toggle_solo():
    track = Track(1, "Vocals")
    assert not track.is_solo
    track.toggle_solo()
    assert track.is_solo
    track.toggle_solo()
    assert not track.is_solo


def test_track_toggle_record_arm():
    track = Track(1, "Vocals")
    track.toggle_record_arm()
    assert track.is_record_armed
    track.toggle_record_arm()
    assert not track.is_record_armed


def test_track_add_effect():
    track = Track(1, "Vocals")
    effect = EffectSetting(1, GAIN)
    track.add_effect(effect)
    assert len(track.effects) == 1
    assert track.effects[0] == effect


def test_track_remove_effect():
    track = Track(1, "Vocals")
    track.add_effect(EffectSetting(1, GAIN))
    track.add_effect(EffectSetting(2, FILTER))
    assert len(track.effects) == 2
    track.remove_effect(1)
    assert len(track.effects) == 1
    assert track.effects[0].id == 2


def test_track_move_effect():
    track = Track(1, "Vocals")
    track.add_effect(EffectSetting(1, GAIN))
    track.add_effect(EffectSetting(2, FILTER))
    track.add_effect(EffectSetting(3, GAIN))
    track.move_effect(0, 2)
    assert [e.id for e in track.effects] == [2, 3, 1]


def test_track_move_effect_out_of_range_is_ignored():
    track = Track(1, "Vocals")
    track.add_effect(EffectSetting(1, GAIN))
    track.add_effect(EffectSetting(2, FILTER))
    track.move_effect(0, 5)
    assert [e.id for e in track.effects] == [1, 2]


def test_track_toggle_synth():
    track = Track(1, "Synth Track")
    assert not track.synth.is_enabled
    track.toggle_synth()
    assert track.synth.is_enabled


def test_track_set_synth_frequency():
    track = Track(1, "Synth Track")
    track.set_synth_frequency(880.0)
    assert track.synth.frequency == 880.0
    track.set_synth_frequency(10.0)
    assert track.synth.frequency == 20.0
    track.set_synth_frequency(30000.0)
    assert track.synth.frequency == 20000.0


def test_effect_setting_defaults_enabled():
    effect = EffectSetting(4, GAIN)
    assert effect.is_enabled
    assert effect.last_sent_type is None


def test_non_delay_effect_rejects_parameters():
    with pytest.raises(ValueError):
        EffectType(EffectKind.GAIN, time_ms=100.0)


def test_effect_type_serialised_forms():
    track = Track(1, "FX")
    track.add_effect(EffectSetting(1, GAIN))
    track.add_effect(EffectSetting(2, EffectType(EffectKind.DELAY, 250.0, 0.4, 0.6)))
    effects = track.to_dict()["effects"]
    assert effects[0] == {"id": 1, "effect_type": "Gain", "is_enabled": True}
    assert effects[1]["effect_type"] == {
        "Delay": {"time_ms": 250.0, "feedback": 0.4, "mix": 0.6}
    }


def test_track_round_trip():
    track = Track(7, "Keys", volume=0.7, pan=-0.25, is_solo=True)
    track.add_effect(EffectSetting(1, EffectType(EffectKind.DELAY, 300.0, 0.3, 0.5)))
    track.synth = SynthSetting(True, 523.25, Waveform.SQUARE, AdsrParams(0.02, 0.2, 0.6, 0.3))
    track.track_type = TrackType.VOCAL_SYNTH
    track.clips.append(AudioClip(1, "Take", 0.0, 2.0))
    track.midi_clips.append(MidiClip(2, "Riff", 0.0, 4.0))
    restored = Track.from_dict(track.to_dict())
    assert restored.to_dict() == track.to_dict()
    assert restored.synth.waveform is Waveform.SQUARE
    assert restored.effects[0].effect_type.kind is EffectKind.DELAY


def test_track_from_dict_uses_defaults_for_optional_fields():
    data = {
        "id": 3,
        "name": "Plain",
        "volume": 1.0,
        "pan": 0.0,
        "is_muted": False,
        "is_solo": False,
        "is_record_armed": True,
        "effects": [],
    }
    track = Track.from_dict(data)
    assert track.is_record_armed
    assert track.synth == SynthSetting()
    assert track.track_type is TrackType.NORMAL
    assert track.clips == []


def test_track_from_dict_missing_required_field():
    with pytest.raises(ValueError):
        Track.from_dict({"id": 3, "name": "Broken"})


def test_track_from_dict_unknown_effect_type():
    data = Track(1, "x").to_dict()
    data["effects"] = [{"id": 1, "effect_type": "Reverb", "is_enabled": True}]
    with pytest.raises(ValueError):
        Track.from_dict(data)