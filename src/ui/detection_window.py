"""
Detection window - camera preview with confirmed sign, confidence and
practice panel.
"""
from typing import Optional
from PyQt5.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QProgressBar, QComboBox,
)
from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QImage, QPixmap
import numpy as np

from feedback.practice import PRACTICE_TARGETS, PracticeSession
from feedback.translations import translate


DEFAULT_STYLE = """
QMainWindow, QWidget#CentralWidget { background-color: #0f172a; }
QLabel { color: #e2e8f0; }
QLabel#SignLabel { font-size: 32px; font-weight: bold; color: white; }
QLabel#CaptionLabel { color: #94a3b8; font-size: 12px; }
QLabel#VerdictLabel { font-size: 18px; font-weight: bold; }
QProgressBar {
    background-color: #1e293b; border: none; border-radius: 3px;
    height: 6px; color: #a5b4fc;
}
QProgressBar::chunk { background-color: #6366f1; border-radius: 3px; }
QComboBox { background-color: #1e293b; color: #e2e8f0; padding: 4px; }
"""


class DetectionWindow(QMainWindow):
    """
    Main detection view.

    Shows the annotated camera frame, the confirmed sign (localized), a
    confidence bar and the practice verdict for the selected target.
    """

    target_changed = pyqtSignal(str)

    def __init__(self, locale: str = "en", practice_target: Optional[str] = None, parent=None):
        super().__init__(parent)
        self._locale = locale
        self._practice = PracticeSession(practice_target)

        self.setWindowTitle("SignLingo")
        self._setup_ui()
        self.setStyleSheet(DEFAULT_STYLE)

        if practice_target:
            index = self.target_box.findText(practice_target, Qt.MatchFixedString)
            if index >= 0:
                self.target_box.setCurrentIndex(index)
            else:
                self.target_box.addItem(practice_target)
                self.target_box.setCurrentText(practice_target)

    def _setup_ui(self):
        """Build the UI."""
        central = QWidget()
        central.setObjectName("CentralWidget")
        layout = QVBoxLayout(central)
        layout.setContentsMargins(10, 10, 10, 10)
        self.setCentralWidget(central)

        self.webcam_preview = QLabel()
        self.webcam_preview.setAlignment(Qt.AlignCenter)
        self.webcam_preview.setMinimumSize(640, 360)
        layout.addWidget(self.webcam_preview, stretch=1)

        # Detected sign row
        sign_row = QHBoxLayout()
        caption = QLabel("DETECTED")
        caption.setObjectName("CaptionLabel")
        sign_row.addWidget(caption)

        self.sign_label = QLabel("...")
        self.sign_label.setObjectName("SignLabel")
        sign_row.addWidget(self.sign_label, stretch=1)

        self.confidence_bar = QProgressBar()
        self.confidence_bar.setRange(0, 100)
        self.confidence_bar.setFixedWidth(120)
        self.confidence_bar.setFormat("%p%")
        self.confidence_bar.setVisible(False)
        sign_row.addWidget(self.confidence_bar)
        layout.addLayout(sign_row)

        # Practice row
        practice_row = QHBoxLayout()
        practice_caption = QLabel("PRACTICE")
        practice_caption.setObjectName("CaptionLabel")
        practice_row.addWidget(practice_caption)

        self.target_box = QComboBox()
        self.target_box.addItem("")
        self.target_box.addItems(PRACTICE_TARGETS)
        self.target_box.currentTextChanged.connect(self._handle_target_changed)
        practice_row.addWidget(self.target_box)

        self.verdict_label = QLabel("")
        self.verdict_label.setObjectName("VerdictLabel")
        practice_row.addWidget(self.verdict_label, stretch=1)
        layout.addLayout(practice_row)

    def _handle_target_changed(self, text: str):
        self._practice.target = text or None
        self.verdict_label.setText("")
        self.target_changed.emit(text)

    def set_result(self, detection):
        """Update label, confidence and practice verdict from a DetectionResult."""
        result = detection.result

        if result.is_confirmed:
            self.sign_label.setText(translate(result.display_text, self._locale))
            self.confidence_bar.setValue(round(result.confidence * 100))
            self.confidence_bar.setVisible(True)
        else:
            self.sign_label.setText("...")
            self.confidence_bar.setVisible(False)

        if self._practice.target:
            if self._practice.check(result):
                self.verdict_label.setText("✔ Correct!")
                self.verdict_label.setStyleSheet("color: #4ade80;")
            else:
                self.verdict_label.setText("Keep trying...")
                self.verdict_label.setStyleSheet("color: #94a3b8;")

    def set_hand_lost(self):
        self.sign_label.setText("...")
        self.confidence_bar.setVisible(False)

    def set_webcam_frame(self, frame: np.ndarray):
        """
        Update the camera preview.

        Args:
            frame: BGR numpy array with overlay from HandTracker
        """
        if frame is None:
            self.webcam_preview.clear()
            return

        rgb = frame[:, :, ::-1].copy()
        h, w, ch = rgb.shape
        bytes_per_line = ch * w
        qimg = QImage(rgb.data, w, h, bytes_per_line, QImage.Format_RGB888)
        pixmap = QPixmap.fromImage(qimg).scaled(
            self.webcam_preview.size(), Qt.KeepAspectRatio, Qt.SmoothTransformation
        )
        self.webcam_preview.setPixmap(pixmap)
