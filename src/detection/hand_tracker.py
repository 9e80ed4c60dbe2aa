"""
MediaPipe Hand Tracker wrapper using the Tasks API.
Handles camera capture and single-hand landmark detection.
"""
from pathlib import Path
from typing import Optional
import time
import cv2
import numpy as np

from .config import Config, CameraConfig, MediaPipeConfig
from .landmarks import HandLandmarks, HAND_CONNECTIONS
from .stabilizer import StabilizedResult

MODEL_URL = "https://storage.googleapis.com/mediapipe-models/hand_landmarker/hand_landmarker/float16/1/hand_landmarker.task"


class HandTracker:
    """
    MediaPipe hand tracking wrapper with camera management.
    Uses the MediaPipe Tasks API (0.10+) in VIDEO mode.

    get_landmarks() returns None when no hand is visible, so callers can tell
    "no hand" apart from "hand present but unrecognized".
    """

    # Default model path relative to project root
    DEFAULT_MODEL_PATH = Path(__file__).parent.parent.parent / "models" / "hand_landmarker.task"

    def __init__(self, config: Config, model_path: Optional[Path] = None):
        """
        Initialize hand tracker.

        Args:
            config: SignLingo configuration
            model_path: Path to hand_landmarker.task model file
        """
        self._camera_config: CameraConfig = config.camera
        self._mp_config: MediaPipeConfig = config.mediapipe
        if model_path is None and self._mp_config.model_path:
            model_path = Path(self._mp_config.model_path)
        self._model_path = Path(model_path) if model_path else self.DEFAULT_MODEL_PATH

        # Lazy initialization
        self._cap: Optional[cv2.VideoCapture] = None
        self._landmarker = None
        self._mp = None

        # State
        self._is_running = False
        self._last_frame: Optional[np.ndarray] = None
        self._frame_count = 0
        self._start_perf: float = 0
        self._last_timestamp_ms: int = -1

    def start(self) -> bool:
        """
        Start camera capture and MediaPipe.

        Returns:
            True if started successfully, False otherwise.
        """
        if self._is_running:
            return True

        if not self._model_path.exists():
            print(f"ERROR: Model file not found: {self._model_path}")
            print(f"Download from: {MODEL_URL}")
            return False

        import mediapipe as mp

        self._cap = cv2.VideoCapture(self._camera_config.device_id)
        if not self._cap.isOpened():
            self._cap.release()
            self._cap = None
            return False

        self._cap.set(cv2.CAP_PROP_FRAME_WIDTH, self._camera_config.width)
        self._cap.set(cv2.CAP_PROP_FRAME_HEIGHT, self._camera_config.height)
        self._cap.set(cv2.CAP_PROP_FPS, self._camera_config.fps)

        BaseOptions = mp.tasks.BaseOptions
        HandLandmarker = mp.tasks.vision.HandLandmarker
        HandLandmarkerOptions = mp.tasks.vision.HandLandmarkerOptions
        VisionRunningMode = mp.tasks.vision.RunningMode

        # One hand only; a second hand in view must never reach the classifier
        options = HandLandmarkerOptions(
            base_options=BaseOptions(model_asset_path=str(self._model_path)),
            running_mode=VisionRunningMode.VIDEO,
            num_hands=1,
            min_hand_detection_confidence=self._mp_config.min_detection_confidence,
            min_tracking_confidence=self._mp_config.min_tracking_confidence,
        )

        self._mp = mp
        self._landmarker = HandLandmarker.create_from_options(options)
        self._start_perf = time.perf_counter()
        self._last_timestamp_ms = -1
        self._is_running = True
        return True

    def stop(self) -> None:
        """Stop camera capture and release resources."""
        self._is_running = False

        if self._landmarker:
            self._landmarker.close()
            self._landmarker = None

        if self._cap:
            self._cap.release()
            self._cap = None

        self._last_frame = None

    def get_landmarks(self) -> Optional[HandLandmarks]:
        """
        Capture frame and detect hand landmarks for the first hand.
        """
        if not self._is_running or self._cap is None or self._landmarker is None:
            return None

        ret, frame = self._cap.read()
        if not ret:
            return None

        self._frame_count += 1

        # Mirror horizontally
        frame = cv2.flip(frame, 1)
        self._last_frame = frame

        rgb_frame = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
        rgb_frame.flags.writeable = False

        mp_image = self._mp.Image(image_format=self._mp.ImageFormat.SRGB, data=rgb_frame)

        # VIDEO mode requires strictly monotonic timestamps
        timestamp_ms = int((time.perf_counter() - self._start_perf) * 1000)
        if timestamp_ms <= self._last_timestamp_ms:
            timestamp_ms = self._last_timestamp_ms + 1
        self._last_timestamp_ms = timestamp_ms

        result = self._landmarker.detect_for_video(mp_image, timestamp_ms)

        if not result.hand_landmarks:
            return None

        handedness = result.handedness[0][0] if result.handedness else None

        # Raises ValueError if the model ever returns a partial hand
        return HandLandmarks.from_points(
            result.hand_landmarks[0],
            handedness=handedness.category_name if handedness else "Unknown",
            confidence=handedness.score if handedness else 0.0,
        )

    def get_frame_with_landmarks(
        self,
        landmarks: Optional[HandLandmarks] = None,
        result: Optional[StabilizedResult] = None,
    ) -> Optional[np.ndarray]:
        """
        Get last frame with landmark and label overlay.

        Returns:
            Annotated copy of the last frame, or None if no frame available.
        """
        if self._last_frame is None:
            return None

        frame = self._last_frame.copy()
        if landmarks is not None:
            draw_landmarks(frame, landmarks)
        if result is not None:
            draw_result(frame, result)
        return frame

    @property
    def is_running(self) -> bool:
        return self._is_running

    @property
    def frame_count(self) -> int:
        return self._frame_count


def draw_landmarks(frame: np.ndarray, landmarks: HandLandmarks) -> np.ndarray:
    """Draw hand skeleton onto a BGR frame in place."""
    h, w = frame.shape[:2]
    for start_idx, end_idx in HAND_CONNECTIONS:
        start = landmarks.get(start_idx)
        end = landmarks.get(end_idx)
        start_pos = (int(start[0] * w), int(start[1] * h))
        end_pos = (int(end[0] * w), int(end[1] * h))
        cv2.line(frame, start_pos, end_pos, (248, 140, 129), 4)

    for x, y, _ in landmarks.landmarks:
        cv2.circle(frame, (int(x * w), int(y * h)), 4, (255, 255, 255), -1)
    return frame


def draw_result(frame: np.ndarray, result: StabilizedResult) -> np.ndarray:
    """Draw confirmed label and confidence bar at the bottom of a frame."""
    h, w = frame.shape[:2]
    text = result.display_text or "..."
    cv2.putText(frame, text, (20, h - 50), cv2.FONT_HERSHEY_SIMPLEX, 1.2, (255, 255, 255), 2)

    if result.is_confirmed:
        bar_w = 200
        cv2.rectangle(frame, (20, h - 30), (20 + bar_w, h - 20), (60, 40, 30), -1)
        cv2.rectangle(
            frame, (20, h - 30), (20 + int(bar_w * result.confidence), h - 20),
            (241, 102, 99), -1,
        )
        cv2.putText(
            frame, f"{round(result.confidence * 100)}%", (30 + bar_w, h - 18),
            cv2.FONT_HERSHEY_SIMPLEX, 0.5, (248, 140, 129), 1,
        )
    return frame
