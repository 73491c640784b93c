import numpy as np

from clip_editor.config import WAVEFORM_SAMPLE_RATE


def sample_amplitudes(
    channel: np.ndarray,
    native_rate: int,
    duration_seconds: float | None = None,
    target_rate: int = WAVEFORM_SAMPLE_RATE,
) -> np.ndarray:
    """
    Downsample raw PCM to one RMS value per 1/target_rate seconds.

    The output has floor(duration * target_rate) values, each the RMS of a
    floor(len(channel) / output_length) wide window, divided by the largest
    value so the loudest window is exactly 1.0. All-silent input stays 0.
    """
    samples = np.asarray(channel, dtype=np.float64).flatten()
    if duration_seconds is None:
        duration_seconds = samples.size / native_rate if native_rate > 0 else 0.0
    output_length = int(np.floor(duration_seconds * target_rate))
    if output_length <= 0 or samples.size == 0:
        return np.array([], dtype=np.float32)

    window = max(1, samples.size // output_length)
    full_windows = min(output_length, samples.size // window)
    frames = samples[: full_windows * window].reshape(full_windows, window)
    rms = np.zeros(output_length, dtype=np.float64)
    rms[:full_windows] = np.sqrt(np.mean(frames * frames, axis=1))

    peak = float(rms.max())
    if peak > 0:
        rms = rms / peak
    return rms.astype(np.float32)
