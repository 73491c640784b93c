import logging
import sys
from pathlib import Path
from PySide6.QtWidgets import (
    QApplication,
    QMainWindow,
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QPushButton,
    QLabel,
    QMessageBox,
    QFileDialog,
    QFrame,
    QScrollArea,
    QSizePolicy,
)
from PySide6.QtCore import Qt, Slot, QTimer, QUrl
from PySide6.QtGui import QShortcut, QKeySequence
from PySide6.QtMultimedia import QAudioOutput, QMediaPlayer
from PySide6.QtMultimediaWidgets import QVideoWidget

from clip_editor.config import PLAYBACK_RATES, POSITION_POLL_INTERVAL_MS
from clip_editor.domain.editor_state import EditorState, EditorUpdate, PlayerCommand
from clip_editor.domain.errors import ClipEditorError, NoMediaLoadedError
from clip_editor.domain.waveform_layout import WaveformLayoutCache
from clip_editor.services.edit_plan_store import default_edit_plan_name
from clip_editor.services.sampling_worker import AmplitudeSamplingWorker
from clip_editor.ui.formatting import format_rate, format_time, segment_count_label
from clip_editor.ui.styles import DARK_STYLE
from clip_editor.ui.waveform_widget import WaveformWidget
from clip_editor.use_cases.apply_amplitudes import ApplyAmplitudes, FailAmplitudes
from clip_editor.use_cases.delete_selection import DeleteSelection
from clip_editor.use_cases.extend_selection import ExtendSelection
from clip_editor.use_cases.load_edit_plan import LoadEditPlan
from clip_editor.use_cases.open_media import OpenMedia
from clip_editor.use_cases.report_media_error import ReportMediaError
from clip_editor.use_cases.save_edit_plan import SaveEditPlan
from clip_editor.use_cases.seek_virtual import SeekVirtual
from clip_editor.use_cases.set_media_duration import SetMediaDuration
from clip_editor.use_cases.set_playback_rate import SetPlaybackRate
from clip_editor.use_cases.sync_playback import SyncPlayback
from clip_editor.use_cases.toggle_playback import TogglePlayback
from clip_editor.use_cases.zoom_timeline import ZoomTimeline

log = logging.getLogger(__name__)

SHORTCUTS_HELP = (
    "Keyboard Shortcuts: Space/K: Play/Pause | Shift+←/→: Select | Del: Delete Selection | "
    "←/→: Seek | ↑/↓: Zoom | H: Jump to Start | 1/2/3/4: Speed | Click waveform to seek"
)


class MainWindow(QMainWindow):
    def __init__(self):
        super().__init__()
        self.state = EditorState()
        self._sampling_workers: list[AmplitudeSamplingWorker] = []
        self._waveform_layouts = WaveformLayoutCache()

        self.seek_use_case = SeekVirtual()
        self.selection_use_case = ExtendSelection()
        self.zoom_use_case = ZoomTimeline()

        self.player = QMediaPlayer(self)
        self.audio_output = QAudioOutput(self)
        self.player.setAudioOutput(self.audio_output)
        self.player.durationChanged.connect(self.on_duration_changed)
        self.player.positionChanged.connect(self.on_position_changed)
        self.player.errorOccurred.connect(self.on_player_error)

        self.transport_timer = QTimer(self)
        self.transport_timer.setInterval(POSITION_POLL_INTERVAL_MS)
        self.transport_timer.timeout.connect(self.poll_player_position)

        self.setWindowTitle("Clip Cutter")
        self.setMinimumSize(960, 640)
        self.resize(1280, 780)
        self.setStyleSheet(DARK_STYLE)

        # ===== Central Widget =====
        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        root_layout = QVBoxLayout()
        root_layout.setContentsMargins(10, 10, 10, 10)
        root_layout.setSpacing(10)
        central_widget.setLayout(root_layout)

        # ===== Top Action Bar =====
        self.action_strip = QWidget()
        self.action_strip.setObjectName("actionStrip")
        self.action_strip.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Fixed)
        action_strip_layout = QHBoxLayout()
        action_strip_layout.setContentsMargins(12, 10, 12, 10)
        action_strip_layout.setSpacing(6)
        self.action_strip.setLayout(action_strip_layout)
        root_layout.addWidget(self.action_strip)

        title_label = QLabel("Clip Cutter")
        title_label.setObjectName("titleLabel")
        action_strip_layout.addWidget(title_label)
        action_strip_layout.addStretch(1)

        self.open_media_button = QPushButton("Open Media")
        self.open_media_button.setObjectName("actionButton")
        self.open_media_button.clicked.connect(self.handle_open_media)
        action_strip_layout.addWidget(self.open_media_button)

        self.load_edits_button = QPushButton("Load Edits")
        self.load_edits_button.setObjectName("actionButton")
        self.load_edits_button.clicked.connect(self.handle_load_edits)
        action_strip_layout.addWidget(self.load_edits_button)

        self.save_edits_button = QPushButton("Save Edits")
        self.save_edits_button.setObjectName("actionButton")
        self.save_edits_button.clicked.connect(self.handle_save_edits)
        action_strip_layout.addWidget(self.save_edits_button)

        # ===== Video Preview =====
        self.video_widget = QVideoWidget()
        self.video_widget.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.player.setVideoOutput(self.video_widget)
        root_layout.addWidget(self.video_widget, 1)

        self.error_label = QLabel("")
        self.error_label.setObjectName("errorLabel")
        self.error_label.setWordWrap(True)
        self.error_label.hide()
        root_layout.addWidget(self.error_label)

        self.status_label = QLabel("Open a media file to begin editing")
        self.status_label.setObjectName("subLabel")
        root_layout.addWidget(self.status_label)

        # ===== Waveform =====
        self.waveform = WaveformWidget()
        self.waveform.positionClicked.connect(self.on_waveform_clicked)
        self.waveform_scroll = QScrollArea()
        self.waveform_scroll.setObjectName("waveformScroll")
        self.waveform_scroll.setWidget(self.waveform)
        self.waveform_scroll.setWidgetResizable(False)
        self.waveform_scroll.setVerticalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.waveform_scroll.setFixedHeight(self.waveform.maximumHeight() + 20)
        self.waveform_scroll.setFrameShape(QFrame.NoFrame)
        root_layout.addWidget(self.waveform_scroll)

        # ===== Transport Row =====
        transport_layout = QHBoxLayout()
        transport_layout.setSpacing(12)
        root_layout.addLayout(transport_layout)

        self.play_button = QPushButton("▶")
        self.play_button.setObjectName("transportButton")
        self.play_button.setToolTip("Play")
        self.play_button.clicked.connect(self.handle_toggle_play)
        transport_layout.addWidget(self.play_button)

        self.time_label = QLabel(f"{format_time(0)} / {format_time(0)}")
        self.time_label.setObjectName("timeLabel")
        transport_layout.addWidget(self.time_label)

        self.rate_label = QLabel(format_rate(self.state.playback_rate))
        self.rate_label.setObjectName("subLabel")
        transport_layout.addWidget(self.rate_label)
        transport_layout.addStretch(1)

        self.delete_button = QPushButton("Delete Selection (Del)")
        self.delete_button.setObjectName("deleteButton")
        self.delete_button.clicked.connect(self.handle_delete_selection)
        transport_layout.addWidget(self.delete_button)

        self.segment_label = QLabel(segment_count_label(0))
        self.segment_label.setObjectName("subLabel")
        transport_layout.addWidget(self.segment_label)

        help_label = QLabel(SHORTCUTS_HELP)
        help_label.setObjectName("helpLabel")
        help_label.setWordWrap(True)
        root_layout.addWidget(help_label)

        self._install_shortcuts()
        self.render_state()

    def _install_shortcuts(self):
        bindings = [
            (Qt.Key_Space, self.handle_toggle_play),
            (Qt.Key_K, self.handle_toggle_play),
            (Qt.Key_Delete, self.handle_delete_selection),
            (Qt.Key_Backspace, self.handle_delete_selection),
            (Qt.Key_Left, lambda: self.handle_edit(self.seek_use_case.backward)),
            (Qt.Key_Right, lambda: self.handle_edit(self.seek_use_case.forward)),
            ("Shift+Left", lambda: self.handle_extend_selection(-1)),
            ("Shift+Right", lambda: self.handle_extend_selection(1)),
            (Qt.Key_Up, lambda: self.handle_edit(self.zoom_use_case.zoom_in)),
            (Qt.Key_Down, lambda: self.handle_edit(self.zoom_use_case.zoom_out)),
            (Qt.Key_H, lambda: self.handle_edit(self.seek_use_case.to_start)),
        ]
        for key, rate in zip((Qt.Key_1, Qt.Key_2, Qt.Key_3, Qt.Key_4), PLAYBACK_RATES):
            bindings.append((key, lambda r=rate: self.handle_set_rate(r)))

        self._shortcuts: list[QShortcut] = []
        for key, handler in bindings:
            shortcut = QShortcut(QKeySequence(key), self)
            shortcut.activated.connect(handler)
            self._shortcuts.append(shortcut)

    # ----- State plumbing -----
    def dispatch(self, update: EditorUpdate):
        """Adopt a new editor state, forward player instructions and repaint."""
        self.state = update.state
        self.apply_player_command(update.command)
        if update.warning:
            self.status_label.setText(update.warning)
        self.render_state(show_status=not update.warning)

    def apply_player_command(self, command: PlayerCommand):
        if command.is_empty:
            return
        if command.rate is not None:
            self.player.setPlaybackRate(command.rate)
        if command.seek_to is not None:
            self.player.setPosition(int(round(command.seek_to * 1000)))
        if command.play is True:
            self.player.play()
            self.transport_timer.start()
        elif command.play is False:
            self.player.pause()
            self.transport_timer.stop()

    def render_state(self, show_status: bool = True):
        state = self.state
        self.open_media_button.setEnabled(True)
        self.load_edits_button.setEnabled(state.can_load_edit_plan)
        self.save_edits_button.setEnabled(state.can_save_edit_plan)
        self.play_button.setEnabled(state.has_media)
        self.play_button.setText("⏸" if state.is_playing else "▶")
        self.play_button.setToolTip("Pause" if state.is_playing else "Play")
        self.delete_button.setEnabled(state.selection is not None and state.has_media)
        self.time_label.setText(f"{format_time(state.playhead)} / {format_time(state.duration)}")
        self.rate_label.setText(format_rate(state.playback_rate))
        self.segment_label.setText(segment_count_label(len(state.segments)))

        if state.media_error:
            self.error_label.setText(f"Error: {state.media_error}")
            self.error_label.show()
        else:
            self.error_label.hide()
        if show_status and state.status:
            self.status_label.setText(state.status)

        viewport_width = max(1, self.waveform_scroll.viewport().width())
        layout = self._waveform_layouts.layout(
            state.segments,
            state.amplitudes,
            state.selection,
            state.playhead,
            viewport_width,
            state.zoom,
        )
        self.waveform.set_waveform_layout(layout)
        self.waveform.set_busy(state.sampling)
        self._keep_playhead_visible(layout.playhead_x)

    def _keep_playhead_visible(self, playhead_x: float | None):
        if playhead_x is None:
            return
        scroll_bar = self.waveform_scroll.horizontalScrollBar()
        client_width = self.waveform_scroll.viewport().width()
        scroll_left = scroll_bar.value()
        if playhead_x < scroll_left or playhead_x > scroll_left + client_width:
            scroll_bar.setValue(int(playhead_x - client_width / 2))

    def resizeEvent(self, event):  # noqa: N802 (Qt API)
        super().resizeEvent(event)
        self.render_state(show_status=False)

    def closeEvent(self, event):  # noqa: N802 (Qt API)
        self.transport_timer.stop()
        self.player.stop()
        for worker in list(self._sampling_workers):
            worker.wait()
        super().closeEvent(event)

    # ----- Player events -----
    @Slot(int)
    def on_duration_changed(self, duration_ms: int):
        if duration_ms <= 0:
            return
        log.info("Media loaded, duration %.3fs", duration_ms / 1000.0)
        self.dispatch(SetMediaDuration().execute(self.state, duration_ms / 1000.0))

    @Slot(int)
    def on_position_changed(self, position_ms: int):
        self.dispatch(SyncPlayback().execute(self.state, position_ms / 1000.0))

    @Slot()
    def poll_player_position(self):
        self.on_position_changed(self.player.position())

    def on_player_error(self, error, error_string: str = ""):
        if error == QMediaPlayer.Error.NoError:
            return
        self.transport_timer.stop()
        self.dispatch(ReportMediaError().execute(self.state, error.name, error_string))

    def on_waveform_clicked(self, fraction: float):
        self.dispatch(self.seek_use_case.to_fraction(self.state, fraction))

    # ----- Sampling -----
    def start_waveform_sampling(self, file_path: Path, generation: int):
        worker = AmplitudeSamplingWorker(file_path, generation)
        worker.sampled.connect(self.on_amplitudes_sampled)
        worker.failed.connect(self.on_amplitudes_failed)
        worker.finished.connect(lambda w=worker: self._release_worker(w))
        self._sampling_workers.append(worker)
        worker.start()

    def _release_worker(self, worker: AmplitudeSamplingWorker):
        if worker in self._sampling_workers:
            self._sampling_workers.remove(worker)
        worker.deleteLater()

    @Slot(int, object)
    def on_amplitudes_sampled(self, generation: int, amplitudes):
        self.dispatch(ApplyAmplitudes().execute(self.state, generation, amplitudes))

    @Slot(int, str)
    def on_amplitudes_failed(self, generation: int, message: str):
        self.dispatch(FailAmplitudes().execute(self.state, generation, message))

    # ----- Handlers -----
    def handle_open_media(self):
        path, _ = QFileDialog.getOpenFileName(
            self,
            "Open Media",
            "",
            "Media Files (*.mp4 *.webm *.ogg *.mov *.mkv *.wav *.flac *.mp3);;All Files (*.*)",
        )
        if not path:
            return
        self.transport_timer.stop()
        update = OpenMedia().execute(self.state, Path(path))
        self.dispatch(update)
        self.player.setSource(QUrl.fromLocalFile(path))
        self.start_waveform_sampling(Path(path), update.state.sampling_generation)

    def handle_load_edits(self):
        if self.state.media_path is None:
            QMessageBox.warning(self, "Load Edits", "Please load a media file first before loading edit data")
            return
        path, _ = QFileDialog.getOpenFileName(
            self,
            "Load Edits",
            "",
            "Edit Files (*.json);;All Files (*.*)",
        )
        if not path:
            return
        try:
            update = LoadEditPlan().execute(self.state, Path(path))
        except (ClipEditorError, OSError) as exc:
            log.warning("Failed to load edit file %s: %s", path, exc)
            QMessageBox.warning(self, "Load Edits", f"Failed to load edit file:\n{exc}")
            return
        self.dispatch(update)

    def handle_save_edits(self):
        if not self.state.can_save_edit_plan:
            return
        path, _ = QFileDialog.getSaveFileName(
            self,
            "Save Edits",
            str(self.state.media_path.with_name(default_edit_plan_name(self.state.media_path))),
            "Edit Files (*.json)",
        )
        if not path:
            return
        try:
            self.dispatch(SaveEditPlan().execute(self.state, Path(path)))
        except (NoMediaLoadedError, ValueError, OSError) as exc:
            QMessageBox.warning(self, "Save Edits", f"Failed to save edits:\n{exc}")

    def handle_edit(self, operation):
        """Run a state operation from a shortcut; inert while no playable media is open."""
        if not self.state.has_media:
            return
        self.dispatch(operation(self.state))

    def handle_toggle_play(self):
        self.dispatch(TogglePlayback().execute(self.state))

    def handle_extend_selection(self, direction: int):
        if not self.state.has_media:
            return
        self.dispatch(self.selection_use_case.execute(self.state, direction))

    def handle_delete_selection(self):
        if not self.state.has_media:
            return
        self.dispatch(DeleteSelection().execute(self.state))

    def handle_set_rate(self, rate: float):
        self.dispatch(SetPlaybackRate().execute(self.state, rate))


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = QApplication(sys.argv)
    window = MainWindow()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
