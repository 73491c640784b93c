from enum import Enum


class ClipEditorError(Exception):
    """Base class for recoverable editor failures."""


class MediaErrorKind(Enum):
    ABORTED = "aborted"
    NETWORK = "network"
    DECODE = "decode"
    SOURCE_NOT_SUPPORTED = "source_not_supported"


MEDIA_ERROR_MESSAGES = {
    MediaErrorKind.ABORTED: "Loading was aborted",
    MediaErrorKind.NETWORK: "A network error interrupted loading",
    MediaErrorKind.DECODE: "The media could not be decoded (unsupported codec)",
    MediaErrorKind.SOURCE_NOT_SUPPORTED: "The media format is not supported",
}


class MediaDecodeError(ClipEditorError):
    """The media player cannot open or decode the loaded file."""

    def __init__(self, kind: MediaErrorKind, detail: str = ""):
        self.kind = kind
        self.detail = detail
        message = MEDIA_ERROR_MESSAGES[kind]
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class AudioDecodeError(ClipEditorError):
    """The audio track cannot be decoded for the waveform overview."""


class EditPlanValidationError(ClipEditorError):
    """An edit plan file is malformed or has no usable segments."""


class NoMediaLoadedError(ClipEditorError):
    """An action needs an open media file and none is loaded."""


class EditPlanFileMismatch(UserWarning):
    """An edit plan was saved for a different media file than the open one."""

    def __init__(self, plan_file: str, media_file: str):
        self.plan_file = plan_file
        self.media_file = media_file
        super().__init__(
            f'Edit file was for "{plan_file}", but current media is "{media_file}"'
        )


# QMediaPlayer.Error names onto the four player error categories.
_PLAYER_ERROR_KINDS = {
    "ResourceError": MediaErrorKind.SOURCE_NOT_SUPPORTED,
    "FormatError": MediaErrorKind.DECODE,
    "NetworkError": MediaErrorKind.NETWORK,
    "AccessDeniedError": MediaErrorKind.ABORTED,
}


def media_error_kind(error_name: str) -> MediaErrorKind:
    """Classify a player error by name; unknown errors count as decode failures."""
    return _PLAYER_ERROR_KINDS.get(error_name, MediaErrorKind.DECODE)
