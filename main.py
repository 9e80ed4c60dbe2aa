"""
SignLingo - Sign Language Detection with Webcam

Entry point for the application.
"""
import argparse
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent / "src"))


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="SignLingo - Sign Language Detection",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config file (default: config.yaml)",
    )

    parser.add_argument(
        "--locale",
        choices=["en", "hi"],
        default=None,
        help="Display and speech language (overrides config)",
    )

    parser.add_argument(
        "--tts",
        action="store_true",
        help="Announce confirmed signs (overrides config)",
    )

    parser.add_argument(
        "--practice",
        default=None,
        metavar="TARGET",
        help="Practice target, e.g. 'Peace' or 'A'",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Run in an OpenCV window instead of the Qt UI",
    )

    return parser.parse_args()


def console_speaker(text, lang):
    """Stand-in speech output: print what would be spoken."""
    print(f"Speak [{lang}]: {text}")


def run_webcam_debug(config, practice_target=None):
    """
    Run detection in an OpenCV window with landmark and label overlay.
    Prints confirmed sign changes to the console.
    """
    import cv2
    from detection import DetectionSession
    from detection.hand_tracker import HandTracker
    from feedback import SpeechFeedback, PracticeSession

    tracker = HandTracker(config)
    session = DetectionSession.from_config(config.stabilizer)
    speech = None
    if config.speech.enabled:
        speech = SpeechFeedback.from_config(config.speech, console_speaker)
    practice = PracticeSession(practice_target)

    print("Starting webcam debug mode...")
    print("Press 'q' to quit")
    print("-" * 40)

    if not tracker.start():
        print("ERROR: Could not open camera")
        return 1

    last_text = ""
    try:
        while True:
            landmarks = tracker.get_landmarks()
            detection = session.process(landmarks)
            result = detection.result

            if result.display_text != last_text:
                last_text = result.display_text
                if last_text:
                    print(f"[{tracker.frame_count:5d}] {last_text} ({result.confidence:.0%})")

            if speech is not None:
                speech.consider(result)

            frame = tracker.get_frame_with_landmarks(landmarks, result)
            if frame is not None:
                raw_text = f"Raw: {detection.raw.value if detection.raw else 'no hand'}"
                cv2.putText(
                    frame, raw_text, (10, 30),
                    cv2.FONT_HERSHEY_SIMPLEX, 0.7, (255, 255, 255), 2
                )
                if practice.target:
                    verdict = "Correct!" if practice.check(result) else "..."
                    cv2.putText(
                        frame, f"Practice {practice.target}: {verdict}", (10, 60),
                        cv2.FONT_HERSHEY_SIMPLEX, 0.7, (128, 222, 74), 2
                    )
                cv2.imshow("SignLingo Debug", frame)

            if cv2.waitKey(1) & 0xFF == ord('q'):
                break

    finally:
        tracker.stop()
        cv2.destroyAllWindows()

    return 0


def run_window_mode(config, practice_target=None):
    """Run SignLingo with the Qt detection window (Multithreaded)."""
    import signal
    import atexit
    from PyQt5.QtWidgets import QApplication
    from PyQt5.QtCore import QThread, Qt
    from detection.worker import WebcamWorker
    from feedback import SpeechFeedback
    from ui import DetectionWindow

    app = QApplication(sys.argv)

    window = DetectionWindow(locale=config.speech.locale, practice_target=practice_target)
    window.show()

    speech = None
    if config.speech.enabled:
        speech = SpeechFeedback.from_config(config.speech, console_speaker)

    thread = QThread()
    worker = WebcamWorker(config)
    worker.moveToThread(thread)

    def cleanup():
        """Ensure camera is released on exit."""
        print("\nCleaning up camera resources...")
        worker.stop_process()
        thread.quit()
        thread.wait(2000)
        print("Cleanup complete.")

    atexit.register(cleanup)

    def signal_handler(signum, frame):
        """Handle Ctrl+C and kill signals gracefully."""
        print(f"\nReceived signal {signum}, shutting down...")
        app.quit()

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    def handle_result(detection):
        window.set_result(detection)
        if speech is not None:
            speech.consider(detection.result)

    thread.started.connect(worker.start_process)
    worker.result_ready.connect(handle_result, Qt.QueuedConnection)
    worker.hand_lost.connect(window.set_hand_lost, Qt.QueuedConnection)
    worker.frame_ready.connect(window.set_webcam_frame, Qt.QueuedConnection)
    worker.error.connect(lambda msg: print(f"WORKER ERROR: {msg}"), Qt.QueuedConnection)
    window.target_changed.connect(lambda t: print(f"Practice target: {t or 'none'}"))

    thread.start()

    try:
        result = app.exec_()
    finally:
        cleanup()
        atexit.unregister(cleanup)  # Avoid double cleanup

    return result


def main():
    """Main entry point."""
    args = parse_args()

    from detection import load_config
    config = load_config(args.config)

    # Apply CLI overrides
    if args.locale:
        config.speech.locale = args.locale
    if args.tts:
        config.speech.enabled = True

    print(f"SignLingo starting...")
    print(f"  Locale: {config.speech.locale}")
    print(f"  Speech: {config.speech.enabled}")
    print(f"  Window: {config.stabilizer.capacity} frames @ {config.stabilizer.threshold:.0%}")
    print(f"  Debug: {args.debug}")
    print()

    if args.debug:
        return run_webcam_debug(config, args.practice)
    return run_window_mode(config, args.practice)


if __name__ == "__main__":
    sys.exit(main())
