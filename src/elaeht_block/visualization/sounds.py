from __future__ import annotations

import logging
from typing import Dict, Optional

import numpy as np
import pygame


logger = logging.getLogger(__name__)

SAMPLE_RATE = 44100


def square_wave(freq: float, duration: float, volume: float = 0.15, sample_rate: int = SAMPLE_RATE) -> np.ndarray:
    """Stereo int16 samples of a square wave."""
    t = np.linspace(0, duration, int(sample_rate * duration), False)
    wave = np.sign(np.sin(2 * np.pi * freq * t)) * volume
    return (np.column_stack((wave, wave)) * 32767).astype(np.int16)


def noise(duration: float, volume: float = 0.05, sample_rate: int = SAMPLE_RATE,
          rng: Optional[np.random.Generator] = None) -> np.ndarray:
    rng = rng or np.random.default_rng()
    samples = np.clip(rng.normal(0, volume, int(sample_rate * duration)), -1.0, 1.0)
    return (np.column_stack((samples, samples)) * 32767).astype(np.int16)


def cue_samples() -> Dict[str, np.ndarray]:
    return {
        "place": square_wave(330, 0.06),
        "clear": square_wave(660, 0.15),
        "game_over": noise(0.5),
    }


class SoundBoard:
    """Synthesized place, clear and game-over cues with a mute toggle."""

    def __init__(self, muted: bool = False) -> None:
        self.muted = muted
        self._sounds: Dict[str, pygame.mixer.Sound] = {}
        try:
            pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=2, buffer=512)
        except pygame.error as exc:
            logger.warning("audio disabled: %s", exc)
            return
        self._sounds = {name: pygame.sndarray.make_sound(samples) for name, samples in cue_samples().items()}

    @property
    def available(self) -> bool:
        return bool(self._sounds)

    def toggle_mute(self) -> bool:
        self.muted = not self.muted
        return self.muted

    def play(self, name: str) -> None:
        if self.muted or name not in self._sounds:
            return
        self._sounds[name].play()
