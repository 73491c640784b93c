DARK_STYLE = """
QMainWindow {
    background-color: #111827;
}

QWidget {
    background-color: #111827;
    color: #F3F4F6;
    font-family: "Segoe UI", "Helvetica Neue", "Arial";
    font-size: 13px;
}

QPushButton {
    background-color: #2563EB;
    border: 1px solid #1D4ED8;
    border-radius: 6px;
    padding: 8px 16px;
    font-weight: 600;
    color: #FFFFFF;
}

QPushButton:hover {
    background-color: #1D4ED8;
}

QPushButton:pressed {
    background-color: #1E40AF;
}

QPushButton:disabled {
    background-color: #4B5563;
    border: 1px solid #4B5563;
    color: #9CA3AF;
}

QWidget#actionStrip {
    background-color: #1F2937;
    border-bottom: 1px solid #374151;
}

QPushButton#deleteButton {
    background-color: #DC2626;
    border: 1px solid #B91C1C;
}

QPushButton#deleteButton:hover {
    background-color: #B91C1C;
}

QPushButton#transportButton {
    min-width: 40px;
    max-width: 40px;
    padding: 6px 0;
    font-size: 16px;
}

QLabel#titleLabel {
    font-size: 18px;
    font-weight: 700;
    background: transparent;
}

QLabel#subLabel,
QLabel#helpLabel {
    color: #9CA3AF;
    font-size: 12px;
}

QLabel#timeLabel {
    font-family: "Consolas", "Menlo", monospace;
}

QLabel#errorLabel {
    background-color: #7F1D1D;
    color: #FECACA;
    border-radius: 6px;
    padding: 10px;
}

QScrollArea#waveformScroll {
    background-color: #111827;
    border-radius: 6px;
}
"""
