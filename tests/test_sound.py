import numpy as np
import pytest

from sound.sound_utils import GAME_TONES, Sounds, ToneSpec, synthesize_tone

RATE = 8000


@pytest.mark.parametrize("key", sorted(GAME_TONES))
def test_tones_have_length_and_decay(key):
    samples = synthesize_tone(GAME_TONES[key], RATE)
    assert samples.dtype == np.int16
    assert len(samples) == RATE
    head = np.abs(samples[: RATE // 20].astype(np.int32)).max()
    tail = np.abs(samples[-RATE // 4 :].astype(np.int32)).max()
    assert head > 0
    assert tail < head


def test_collision_tone_starts_at_configured_gain():
    samples = synthesize_tone(GAME_TONES["collision"], RATE)
    assert abs(int(samples[0])) == pytest.approx(0.2 * 32767, rel=0.01)


def test_unknown_waveform_rejected():
    with pytest.raises(ValueError):
        synthesize_tone(ToneSpec("triangle", 200.0, gain_start=0.1, gain_ramp_s=0.5), RATE)


def test_play_without_mixer_is_noop():
    assert not Sounds.is_available()
    assert Sounds.play("switch") is None


def test_play_muted_is_noop(monkeypatch):
    monkeypatch.setattr(Sounds, "muted", True)
    assert Sounds.play("collision") is None


def test_missing_sound_warns_once(monkeypatch, capsys):
    monkeypatch.setattr(Sounds, "_inited", True)
    monkeypatch.setattr(Sounds, "_sounds", {})
    monkeypatch.setattr(Sounds, "_missing_warned", set())
    monkeypatch.setattr("pygame.mixer.get_init", lambda: (44100, -16, 2))
    assert Sounds.play("nope") is None
    assert Sounds.play("nope") is None
    assert capsys.readouterr().out.count("sound 'nope' not loaded") == 1
