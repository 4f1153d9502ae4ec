import logging
import math
import random
import struct

import pygame

from .settings import MASTER_VOLUME, SAMPLE_RATE, SFX_VOLUME

log = logging.getLogger(__name__)


def _envelope(samples, fade_s, amp):
    """Pack float samples as 16-bit PCM with a linear fade in and out."""
    n = len(samples)
    fade = max(1, int(fade_s * SAMPLE_RATE))
    buf = bytearray()
    for i, sample in enumerate(samples):
        if i < fade:
            sample *= i / fade
        if i > n - fade:
            sample *= max(0.0, (n - i) / fade)
        buf += struct.pack("<h", int(sample * amp * 32767))
    return bytes(buf)


class SoundManager:
    """Fire-and-forget sound effects generated at startup. A disabled manager is silent."""

    def __init__(self, enabled: bool):
        self.enabled = enabled
        self.sounds = {}
        if not enabled:
            return
        try:
            pygame.mixer.pre_init(SAMPLE_RATE, size=-16, channels=1, buffer=512)
            pygame.mixer.init()
            pygame.mixer.set_num_channels(12)
        except pygame.error as e:
            log.warning("audio disabled: %s", e)
            self.enabled = False
            return
        self.sounds["shoot"] = self._tone(880, 0.04, amp=0.30)
        self.sounds["hit"] = self._tone(210, 0.12, amp=0.50)
        self.sounds["boom"] = self._noise(0.2, amp=0.40)
        self.sounds["power"] = self._tone(1200, 0.06, amp=0.45)
        self.sounds["boss"] = self._tone(320, 0.25, amp=0.45)
        self.sounds["gameover"] = self._tone(160, 0.5, amp=0.45)
        for s in self.sounds.values():
            s.set_volume(MASTER_VOLUME * SFX_VOLUME)

    def _tone(self, freq_hz: float, duration: float, amp: float = 0.45):
        n = int(SAMPLE_RATE * duration)
        samples = [math.sin(2 * math.pi * freq_hz * i / SAMPLE_RATE) for i in range(n)]
        return pygame.mixer.Sound(buffer=_envelope(samples, 0.005, amp))

    def _noise(self, duration: float, amp: float = 0.35):
        # decaying white noise burst
        n = int(SAMPLE_RATE * duration)
        samples = [(random.random() * 2 - 1) * (1 - i / n) for i in range(n)]
        return pygame.mixer.Sound(buffer=_envelope(samples, 0.01, amp))

    def play(self, name: str):
        if not self.enabled or name not in self.sounds:
            return
        try:
            self.sounds[name].play()
        except pygame.error as e:
            log.debug("could not play %s: %s", name, e)
