"""Procedural tone synthesis and playback utilities for pygame.mixer.

Keep a tiny registry so the rest of the code can trigger sounds by key
without juggling Sound objects. Nothing is loaded from disk: each effect is
described by a `ToneSpec` and rendered to a sample buffer with numpy.

Usage:

    from sound.sound_utils import Sounds, GAME_TONES

    Sounds.ensure_init()  # safe to call many times
    Sounds.register_tones(GAME_TONES)
    Sounds.play("switch")

All operations fail gracefully if the mixer can't initialize (no audio
device); errors are printed once and calls become no-ops.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Set

import numpy as np
import pygame

from config import MUTE, AUDIO_SAMPLE_RATE


@dataclass(frozen=True)
class ToneSpec:
    """A single oscillator with exponential frequency and gain ramps.

    The frequency moves from `freq_start` to `freq_end` over `freq_ramp_s`
    and then holds; the gain decays from `gain_start` to `gain_end` over
    `gain_ramp_s` and then holds.
    """

    waveform: str  # 'sine' | 'square' | 'sawtooth'
    freq_start: float
    gain_start: float
    gain_ramp_s: float
    freq_end: Optional[float] = None
    freq_ramp_s: float = 0.0
    gain_end: float = 0.00001
    duration_s: float = 1.0


GAME_TONES: Dict[str, ToneSpec] = {
    "switch": ToneSpec("sine", 100.0, gain_start=0.1, gain_ramp_s=0.5),
    "pass": ToneSpec(
        "sawtooth",
        440.0,
        gain_start=0.05,
        gain_ramp_s=0.5,
        freq_end=880.0,
        freq_ramp_s=0.5,
    ),
    "collision": ToneSpec("square", 150.0, gain_start=0.2, gain_ramp_s=1.0),
}


def _exp_ramp(t: np.ndarray, start: float, end: float, ramp_s: float) -> np.ndarray:
    if ramp_s <= 0 or start == end:
        return np.full(t.shape, end if ramp_s <= 0 else start, dtype=np.float64)
    frac = np.clip(t / ramp_s, 0.0, 1.0)
    return start * (end / start) ** frac


def synthesize_tone(tone: ToneSpec, sample_rate: int = AUDIO_SAMPLE_RATE) -> np.ndarray:
    """Render `tone` to a mono int16 sample array."""
    n = max(1, int(sample_rate * tone.duration_s))
    t = np.arange(n, dtype=np.float64) / sample_rate

    freq_end = tone.freq_start if tone.freq_end is None else tone.freq_end
    freq = _exp_ramp(t, tone.freq_start, freq_end, tone.freq_ramp_s)
    # Integrate frequency so ramps stay phase-continuous
    cycles = np.cumsum(freq) / sample_rate

    if tone.waveform == "sine":
        wave = np.sin(2.0 * np.pi * cycles)
    elif tone.waveform == "square":
        wave = np.where(np.sin(2.0 * np.pi * cycles) >= 0.0, 1.0, -1.0)
    elif tone.waveform == "sawtooth":
        wave = 2.0 * (cycles - np.floor(cycles + 0.5))
    else:
        raise ValueError(f"unknown waveform: {tone.waveform!r}")

    gain = _exp_ramp(t, tone.gain_start, tone.gain_end, tone.gain_ramp_s)
    samples = np.clip(wave * gain, -1.0, 1.0) * 32767.0
    return samples.astype(np.int16)


class Sounds:
    """Static manager for synthesizing and playing short SFX.

    Notes
    -----
    - Initializes pygame.mixer lazily on first use.
    - Stores sounds by a string key (e.g., "switch").
    - `play()` uses a free channel (reserving one if necessary) and returns it.
    - All methods are safe even if audio isn't available; they just no-op.
    """

    muted: bool = MUTE
    _inited: bool = False
    _failed_init: bool = False
    _sounds: Dict[str, pygame.mixer.Sound] = {}
    _missing_warned: Set[str] = set()

    @classmethod
    def ensure_init(
        cls,
        *,
        frequency: int = AUDIO_SAMPLE_RATE,
        size: int = -16,
        channels: int = 2,
        buffer: int = 512,
    ) -> bool:
        """Initialize pygame.mixer if needed. Returns True on success.

        Safe to call multiple times.
        """
        if cls._inited:
            return True
        if cls._failed_init:
            return False
        try:
            # If pygame.init() was called already, mixer may be ready; check first.
            if pygame.mixer.get_init() is None:
                pygame.mixer.init(
                    frequency=frequency, size=size, channels=channels, buffer=buffer
                )
            cls._inited = pygame.mixer.get_init() is not None
            return cls._inited
        except pygame.error as e:  # pragma: no cover - environment dependent
            print(f"[Sounds] Mixer init failed: {e}")
            cls._failed_init = True
            return False

    @classmethod
    def is_available(cls) -> bool:
        """Return True if audio playback should work."""
        return cls._inited and (pygame.mixer.get_init() is not None)

    @classmethod
    def register_tone(cls, key: str, tone: ToneSpec) -> Optional[pygame.mixer.Sound]:
        """Synthesize `tone` at the mixer's format and register it under `key`.

        Returns the Sound object, or None when audio is unavailable.
        """
        if not cls.ensure_init():
            return None
        rate, _fmt, channels = pygame.mixer.get_init()
        mono = synthesize_tone(tone, rate)
        if channels > 1:
            data = np.ascontiguousarray(np.repeat(mono[:, np.newaxis], channels, axis=1))
        else:
            data = mono
        try:
            snd = pygame.mixer.Sound(buffer=data.tobytes())
        except pygame.error as e:  # pragma: no cover - driver dependent
            print(f"[Sounds] Failed to build '{key}': {e}")
            return None
        cls._sounds[key] = snd
        return snd

    @classmethod
    def register_tones(cls, tones: Mapping[str, ToneSpec]) -> None:
        for key, tone in tones.items():
            cls.register_tone(key, tone)

    @classmethod
    def play(cls, key: str) -> Optional[pygame.mixer.Channel]:
        """Play a sound registered with `register_tone`, fire-and-forget."""
        if cls.muted:
            return None
        if not cls.is_available():
            return None
        snd = cls._sounds.get(key)
        if snd is None:
            # Print only once per missing key to avoid spam.
            if key not in cls._missing_warned:
                print(f"[Sounds] Warning: sound '{key}' not loaded")
                cls._missing_warned.add(key)
            return None

        ch = pygame.mixer.find_channel(True)
        if ch is None:
            return None
        ch.play(snd)
        return ch


__all__ = ["ToneSpec", "GAME_TONES", "synthesize_tone", "Sounds"]
