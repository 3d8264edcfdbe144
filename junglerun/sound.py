"""Background music and numbered sound effects."""

from __future__ import annotations

import pygame

MUSIC_FILE = "sound/background.mp3"
SOUND_FILES = (
    "sound/garand_single.wav",
    "sound/shoot.wav",
    "sound/shotgun.wav",
    "sound/TaDa.wav",
    "sound/Boom.wav",
    "sound/Gun.wav",
    "sound/Thump.wav",
    "sound/phaser.wav",
    "sound/Putt1.wav",
    "sound/explosion.wav",
    "sound/cannon.wav",
    "sound/Larc.wav",
)
DEFAULT_VOLUME = 0.25

_AUDIO_RATE = 22050
_AUDIO_SIZE = -16
_AUDIO_CHANNELS = 2
_AUDIO_BUFFERS = 4096
_MIN_MIXER_CHANNELS = 8


class Sound:
    """Plays looping music and one sound effect at a time."""

    def __init__(self, music_file: str = MUSIC_FILE, sound_files=SOUND_FILES, volume: float = DEFAULT_VOLUME) -> None:
        self.volume = float(volume)
        self._current: int | None = None
        self._paused = False
        try:
            pygame.mixer.init(
                frequency=_AUDIO_RATE, size=_AUDIO_SIZE, channels=_AUDIO_CHANNELS, buffer=_AUDIO_BUFFERS
            )
        except pygame.error as exc:
            raise RuntimeError("Unable to open audio!") from exc
        try:
            pygame.mixer.music.load(music_file)
        except (pygame.error, OSError) as exc:
            pygame.mixer.quit()
            raise RuntimeError(f"Couldn't load {music_file}: {exc}") from exc
        self.start_music()
        self.sounds = [self._load(path) for path in sound_files]
        pygame.mixer.set_num_channels(max(_MIN_MIXER_CHANNELS, len(self.sounds)))
        self._channels = list(range(len(self.sounds)))

    @staticmethod
    def _load(path: str):
        try:
            return pygame.mixer.Sound(path)
        except (pygame.error, OSError):
            return None

    def __enter__(self) -> Sound:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def paused(self) -> bool:
        """Whether the music is paused."""
        return self._paused

    def start_music(self) -> None:
        """Play the music in an endless loop."""
        pygame.mixer.music.set_volume(self.volume)
        pygame.mixer.music.play(-1)
        self._paused = False

    def stop_music(self) -> None:
        """Stop the music and release it."""
        pygame.mixer.music.stop()
        pygame.mixer.music.unload()

    def toggle_music(self) -> None:
        """Pause the music if playing, resume it if paused."""
        if self._paused:
            pygame.mixer.music.unpause()
        else:
            pygame.mixer.music.pause()
        self._paused = not self._paused

    def play(self, index: int) -> None:
        """Play sound ``index``, stopping the one played before it."""
        if not 0 <= index < len(self.sounds):
            raise IndexError(f"no sound number {index}")
        if self._current is not None:
            pygame.mixer.Channel(self._channels[self._current]).stop()
        self._current = index
        sound = self.sounds[index]
        if sound is None:
            return
        sound.set_volume(self.volume)
        pygame.mixer.Channel(self._channels[index]).play(sound)

    def close(self) -> None:
        """Stop everything and shut the mixer down."""
        pygame.mixer.music.stop()
        for sound in self.sounds:
            if sound is not None:
                sound.stop()
        pygame.mixer.quit()