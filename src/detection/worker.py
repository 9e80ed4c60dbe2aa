"""
Background worker for MediaPipe hand tracking and sign detection.
Runs in a separate QThread to avoid blocking the UI.
"""
import time
from typing import Optional
from PyQt5.QtCore import QObject, pyqtSignal

from .hand_tracker import HandTracker
from .session import DetectionSession


class WebcamWorker(QObject):
    """
    Worker class that handles the capture and classification loop.
    Emits signals for UI updates.
    """
    # Signals
    result_ready = pyqtSignal(object)  # Emits DetectionResult
    hand_lost = pyqtSignal()
    frame_ready = pyqtSignal(object)  # Emits numpy array (BGR frame with overlay)
    error = pyqtSignal(str)

    def __init__(self, config, parent=None):
        super().__init__(parent)
        self._config = config
        self._tracker: Optional[HandTracker] = None
        self._session: Optional[DetectionSession] = None
        self._is_running = False

    @property
    def session(self) -> Optional[DetectionSession]:
        return self._session

    def start_process(self):
        """Main processing loop. Runs in worker thread."""
        self._tracker = HandTracker(self._config)
        self._session = DetectionSession.from_config(self._config.stabilizer)

        if not self._tracker.start():
            self.error.emit("Could not open camera or load hand model")
            return

        self._is_running = True

        ui = self._config.ui
        min_interval = 1.0 / max(1, ui.target_fps)
        frame_interval = 1.0 / max(1, ui.preview_fps)
        last_frame_time = 0.0
        had_hand = False

        try:
            while self._is_running:
                loop_start = time.perf_counter()

                landmarks = self._tracker.get_landmarks()
                detection = self._session.process(landmarks)

                if detection.hand_present:
                    had_hand = True
                elif had_hand:
                    had_hand = False
                    self.hand_lost.emit()

                self.result_ready.emit(detection)

                now = time.perf_counter()
                if ui.show_preview and now - last_frame_time >= frame_interval:
                    frame = self._tracker.get_frame_with_landmarks(landmarks, detection.result)
                    if frame is not None:
                        self.frame_ready.emit(frame)
                    last_frame_time = now

                elapsed = time.perf_counter() - loop_start
                sleep_time = min_interval - elapsed
                if sleep_time > 0:
                    time.sleep(sleep_time)

        except Exception as e:
            self.error.emit(f"Worker Exception: {str(e)}")
        finally:
            self._is_running = False
            if self._tracker:
                self._tracker.stop()

    def stop_process(self):
        """Signal the loop to stop and release resources in worker thread."""
        self._is_running = False
