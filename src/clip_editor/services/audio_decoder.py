import io
import logging
from pathlib import Path

import numpy as np
import soundfile as sf
from pydub import AudioSegment
from pydub.exceptions import CouldntDecodeError

from clip_editor.domain.errors import AudioDecodeError

log = logging.getLogger(__name__)


def read_media_bytes(file_path: Path) -> bytes:
    try:
        return Path(file_path).read_bytes()
    except OSError as exc:
        raise AudioDecodeError(f"Cannot read {file_path}: {exc}") from exc


def _decode_container(raw: bytes) -> tuple[np.ndarray, int]:
    """Decode the audio track of a video or compressed container through ffmpeg."""
    try:
        audio = AudioSegment.from_file(io.BytesIO(raw))
    except (CouldntDecodeError, OSError) as exc:
        raise AudioDecodeError(f"Cannot decode audio: {exc}") from exc

    samples = np.array(audio.get_array_of_samples(), dtype=np.float32)
    full_scale = float(1 << (8 * audio.sample_width - 1))
    return samples.reshape(-1, audio.channels) / full_scale, audio.frame_rate


def decode_audio(raw: bytes) -> tuple[np.ndarray, int, float]:
    """
    Decode in-memory file bytes into (first_channel, sample_rate, duration).

    Plain audio files (WAV, FLAC, OGG, ...) are read with soundfile. Anything
    libsndfile cannot open, such as the audio track of an MP4, MOV, MKV or
    WebM file, is handed to pydub. Raises AudioDecodeError when neither can
    decode the bytes.
    """
    if not raw:
        raise AudioDecodeError("File is empty")
    try:
        data, sample_rate = sf.read(io.BytesIO(raw), dtype="float32", always_2d=True)
    except (RuntimeError, TypeError, ValueError) as exc:
        log.debug("soundfile cannot read the container (%s), decoding with pydub", exc)
        data, sample_rate = _decode_container(raw)

    if sample_rate <= 0 or data.shape[0] == 0:
        raise AudioDecodeError("Audio track is empty")

    channel = np.ascontiguousarray(data[:, 0])
    duration = channel.size / sample_rate
    log.info("Decoded %d samples at %d Hz (%.2fs)", channel.size, sample_rate, duration)
    return channel, int(sample_rate), duration
