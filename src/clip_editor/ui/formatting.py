import math


def format_time(seconds: float) -> str:
    """Format seconds as m:ss.cc for the time readout."""
    seconds = max(0.0, float(seconds))
    minutes = int(seconds // 60)
    secs = int(seconds % 60)
    hundredths = int(math.floor((seconds % 1) * 100))
    return f"{minutes}:{secs:02d}.{hundredths:02d}"


def format_rate(rate: float) -> str:
    return f"Speed: {rate:g}x"


def segment_count_label(count: int) -> str:
    return f"{count} segment{'s' if count != 1 else ''}"
