"""
Sound playback for the frame's audio intents, using Arcade
"""

from __future__ import annotations

import os
from typing import Dict, Optional

import arcade

from .commands import Frame, PlayLoop, PlaySound

DEFAULT_TRACKS = {
    "background": "background.wav",
    "collect": "collect.wav",
    "collision": "collision.wav",
}


class AudioMixer:
    """Named tracks with one looping channel and a global mute"""

    def __init__(self, assets_dir: str, tracks: Optional[Dict[str, str]] = None, muted: bool = False, verbose: int = 1):
        self.verbose = verbose
        self.muted = muted
        self._sounds: Dict[str, arcade.Sound] = {}
        self._one_shots: Dict[str, object] = {}
        self._loop_track: Optional[str] = None
        self._loop_player = None
        self._loop_volume = 1.0

        for name, filename in (tracks or DEFAULT_TRACKS).items():
            path = os.path.join(assets_dir, filename)
            if not os.path.exists(path):
                # Missing audio only silences that track
                if self.verbose > 0:
                    print(f"[AudioMixer] No sound for '{name}' at {path}, track disabled")
                continue
            self._sounds[name] = arcade.load_sound(path)

    def play_loop(self, track: str, volume: float) -> None:
        self.stop_loop()
        sound = self._sounds.get(track)
        self._loop_track = track
        self._loop_volume = volume
        if sound is None:
            return
        self._loop_player = sound.play(volume=0.0 if self.muted else volume, loop=True)

    def stop_loop(self) -> None:
        if self._loop_player is not None:
            self._sounds[self._loop_track].stop(self._loop_player)
        self._loop_player = None
        self._loop_track = None

    def play_once(self, track: str) -> None:
        sound = self._sounds.get(track)
        if sound is None or self.muted:
            return
        # Restart from the beginning if it is still playing
        previous = self._one_shots.get(track)
        if previous is not None:
            sound.stop(previous)
        self._one_shots[track] = sound.play()

    def toggle_mute(self) -> bool:
        self.muted = not self.muted
        if self._loop_player is not None:
            self._loop_player.volume = 0.0 if self.muted else self._loop_volume
        if self.muted:
            for track, player in self._one_shots.items():
                self._sounds[track].stop(player)
            self._one_shots.clear()
        return self.muted

    def apply(self, frame: Frame) -> None:
        for cmd in frame.sounds:
            if isinstance(cmd, PlayLoop):
                self.play_loop(cmd.track, cmd.volume)
            elif isinstance(cmd, PlaySound):
                self.play_once(cmd.track)

    def close(self) -> None:
        self.stop_loop()
        for track, player in self._one_shots.items():
            self._sounds[track].stop(player)
        self._one_shots.clear()
