from pathlib import Path

from opendaw.state.freeze import FreezeState


def test_default_is_inactive():
    state = FreezeState()
    assert state.is_frozen is False
    assert state.cached_wav_path is None
    assert state.is_active is False


def test_freeze_records_path_and_version():
    state = FreezeState()
    state.freeze("cache/track1.wav", 7)
    assert state.is_frozen is True
    assert state.cached_wav_path == Path("cache/track1.wav")
    assert state.source_version == 7
    assert state.is_active is True


def test_unfreeze_keeps_cache():
    state = FreezeState()
    state.freeze(Path("render.wav"), 1)
    state.unfreeze()
    assert state.is_active is False
    assert state.cached_wav_path == Path("render.wav")


def test_refreeze_after_unfreeze_reactivates():
    state = FreezeState()
    state.freeze("render.wav", 1)
    state.unfreeze()
    state.freeze("render.wav", 2)
    assert state.is_active is True
    assert state.source_version == 2


def test_clear_cache_unfreezes():
    state = FreezeState()
    state.freeze("render.wav", 3)
    state.clear_cache()
    assert state.is_frozen is False
    assert state.cached_wav_path is None
    assert state.is_active is False


def test_frozen_without_path_is_not_active():
    state = FreezeState(is_frozen=True)
    assert state.is_active is False