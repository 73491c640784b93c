from __future__ import annotations

import numpy as np
from PySide6.QtCore import Qt, Signal, QRectF
from PySide6.QtGui import QColor, QPainter, QPen
from PySide6.QtWidgets import QWidget

from clip_editor.domain.waveform_layout import WaveformLayout


class WaveformWidget(QWidget):
    """Paints a prepared WaveformLayout: bars, segment separators, selection and playhead."""
    positionClicked = Signal(float)

    BAR_HEIGHT_RATIO = 0.8

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._layout = WaveformLayout(width=0.0, placeholder=True)
        self._busy = False
        self.setMinimumHeight(120)
        self.setMaximumHeight(120)

    def set_waveform_layout(self, layout: WaveformLayout) -> None:
        """Set the layout to draw and resize to its full (zoomed) width."""
        self._layout = layout
        self.setFixedWidth(max(1, int(np.ceil(layout.width))))
        self.update()

    def set_busy(self, busy: bool) -> None:
        self._busy = busy
        self.update()

    @staticmethod
    def bar_rect(x: float, bar_width: float, amplitude: float, height: float) -> tuple[float, float, float, float]:
        """Vertically centred rectangle (x, y, w, h) for one amplitude bar."""
        bar_height = float(np.clip(amplitude, 0.0, 1.0)) * height * WaveformWidget.BAR_HEIGHT_RATIO
        y = (height / 2) - (bar_height / 2)
        return x, y, max(1.0, bar_width + 0.5), bar_height

    def paintEvent(self, event) -> None:  # noqa: N802 (Qt API)
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, False)

        rect = self.rect()
        painter.fillRect(rect, QColor("#111827"))
        height = rect.height()
        layout = self._layout

        if layout.placeholder:
            painter.fillRect(QRectF(0, height / 2 - 2, rect.width(), 4), QColor("#4B5563"))
        else:
            bar_color = QColor("#3B82F6")
            xs, widths, heights = layout.bars.columns(event.rect().left(), event.rect().right() + 1)
            for x, bar_width, amplitude in zip(xs.tolist(), widths.tolist(), heights.tolist()):
                painter.fillRect(QRectF(*self.bar_rect(x, bar_width, amplitude, height)), bar_color)

            separator_color = QColor("#1F2937")
            for x in layout.separators:
                painter.fillRect(QRectF(x, 0, 2, height), separator_color)

            if layout.selection_span is not None:
                x1, x2 = layout.selection_span
                painter.fillRect(QRectF(x1, 0, x2 - x1, height), QColor(239, 68, 68, 76))
                select_pen = QPen(QColor("#EF4444"))
                select_pen.setWidth(2)
                painter.setPen(select_pen)
                painter.drawLine(int(x1), 0, int(x1), height)
                painter.drawLine(int(x2), 0, int(x2), height)

            if layout.playhead_x is not None:
                playhead_pen = QPen(QColor("#FFFFFF"))
                playhead_pen.setWidth(2)
                painter.setPen(playhead_pen)
                x = int(layout.playhead_x)
                painter.drawLine(x, 0, x, height)

        if self._busy:
            painter.fillRect(rect, QColor(17, 24, 39, 190))
            painter.setPen(QPen(QColor("#ECF2FF")))
            painter.drawText(rect, Qt.AlignCenter, "Generating waveform...")

    def mousePressEvent(self, event) -> None:  # noqa: N802 (Qt API)
        if event.button() != Qt.LeftButton:
            return
        self.positionClicked.emit(self._layout.x_to_fraction(event.position().x()))
