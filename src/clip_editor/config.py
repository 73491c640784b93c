"""
Clip Cutter configuration
"""

# Timeline matching tolerances (seconds)
TIME_EPSILON = 0.001  # floating point drift absorbed by the time mapper
SEGMENT_MATCH_TOLERANCE = 0.1  # decoder imprecision around segment edges
SEGMENT_END_LOOKAHEAD = 0.05  # jump to the next segment this close to the end

# Waveform
WAVEFORM_SAMPLE_RATE = 50  # amplitude values per second of source

# Editing controls
SEEK_STEP = 0.4
SELECTION_STEP = 0.1

# Zoom
ZOOM_STEP = 1.5
ZOOM_MIN = 1.0
ZOOM_MAX = 20.0

# Playback
PLAYBACK_RATES = (0.5, 1.0, 1.5, 2.0)
POSITION_POLL_INTERVAL_MS = 33

# Edit plan files
EDIT_PLAN_SUFFIX = "_edits.json"
