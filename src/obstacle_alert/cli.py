"""
Obstacle Alert CLI
Main entry point for running scans.

Modes:
  (default)    Press Enter to scan, 'l' toggles the label panel, 'q' quits
  --interval   Scan automatically every N seconds
  --once       Run a single scan and exit
  --image      Scan an image file instead of the camera (single scan)
  --validate   Check configuration validity
"""

import argparse
import logging
import signal
import sys
from threading import Event as ThreadEvent

from .audio import AudioError, FeedbackPlayer, init_audio, shutdown_audio
from .config import (
    ConfigValidationError,
    load_config,
    print_validation_result,
    validate_config_full,
)
from .core import CameraError, CameraSource, ImageFileSource, ScanSession, ScanStatus
from .ui import print_display
from .vision import VisionClient

logger = logging.getLogger(__name__)

# Module-level shutdown signal for SIGTERM/SIGINT handling
_shutdown_signal = ThreadEvent()


def _handle_shutdown_signal(signum, _frame):
    """Handle SIGTERM/SIGINT for graceful shutdown."""
    signal_name = "SIGTERM" if signum == signal.SIGTERM else "SIGINT"
    # Note: print is safer than logger in signal handlers
    print(f"\nReceived {signal_name}, stopping after the current scan...")
    _shutdown_signal.set()


def _setup_signal_handlers():
    """Register signal handlers for graceful shutdown."""
    signal.signal(signal.SIGTERM, _handle_shutdown_signal)
    signal.signal(signal.SIGINT, _handle_shutdown_signal)


def setup_logging(quiet: bool = False) -> None:
    """
    Setup logging configuration.

    Args:
        quiet: If True, only show warnings and errors
    """
    level = logging.WARNING if quiet else logging.INFO

    # Custom formatter with shorter module names
    class ShortNameFormatter(logging.Formatter):
        def format(self, record):
            record.name = record.name.replace("obstacle_alert.", "oa.")
            return super().format(record)

    handler = logging.StreamHandler()
    handler.setFormatter(
        ShortNameFormatter(
            fmt="%(asctime)s %(name)s %(levelname)s %(message)s", datefmt="%H:%M:%S"
        )
    )
    logging.root.addHandler(handler)
    logging.root.setLevel(level)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Obstacle Alert - Camera scans with audible obstacle alerts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m obstacle_alert                  # Press Enter to scan
  python -m obstacle_alert --interval 5     # Scan every 5 seconds
  python -m obstacle_alert --once           # One scan, then exit
  python -m obstacle_alert --image hall.jpg # Scan a photo
  python -m obstacle_alert --validate       # Check config validity

Environment Variables:
  GOOGLE_VISION_API_KEY - Vision API key (overrides config)
  CAMERA_URL            - Camera source (overrides config)
        """,
    )

    parser.add_argument(
        "-c",
        "--config",
        default=None,
        help="Path to config file (default: ./config.yaml if present)",
    )

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--interval",
        type=float,
        metavar="SECONDS",
        help="Scan automatically every N seconds (default: from config)",
    )
    mode.add_argument("--once", action="store_true", help="Run a single scan and exit")
    mode.add_argument(
        "--image", metavar="PATH", help="Scan an image file instead of the camera"
    )

    parser.add_argument(
        "--validate",
        action="store_true",
        help="Validate configuration and show derived settings",
    )

    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Quiet mode - only show warnings and errors",
    )

    return parser.parse_args(argv)


def print_banner(mode: str) -> None:
    """Print system startup banner."""
    print("\n" + "=" * 60)
    print("OBSTACLE ALERT")
    print("=" * 60)
    print(f"Mode: {mode}")
    if mode == "manual":
        print("  Enter = scan, l = toggle labels, q = quit")
    else:
        print("  Press Ctrl+C to stop")
    print("=" * 60)


def run_scan(session: ScanSession) -> ScanStatus:
    """Run one scan and show the display."""
    report = session.scan()
    if report.status is not ScanStatus.BUSY:
        print_display(session.display)
    return report.status


def run_periodic(session: ScanSession, interval: float) -> None:
    """Scan every `interval` seconds until a shutdown signal arrives."""
    logger.info(f"Scanning every {interval:g}s")
    while not _shutdown_signal.is_set():
        run_scan(session)
        _shutdown_signal.wait(interval)


def run_interactive(session: ScanSession) -> None:
    """Scan on Enter until 'q', EOF or a shutdown signal."""
    while not _shutdown_signal.is_set():
        try:
            command = input("> ").strip().lower()
        except (EOFError, KeyboardInterrupt):
            break

        if command == "q":
            break
        if command == "l":
            session.display.toggle_labels()
            print_display(session.display)
            continue

        try:
            run_scan(session)
        except KeyboardInterrupt:
            print("\nInterrupted by user (Ctrl+C)")
            break


def main(argv: list[str] | None = None) -> None:
    """Main orchestrator function."""
    args = parse_args(argv)
    setup_logging(quiet=args.quiet or args.validate)

    try:
        config = load_config(args.config)
    except ConfigValidationError as e:
        logger.error(str(e))
        sys.exit(1)

    result = validate_config_full(config, require_camera=not args.image)

    if args.validate:
        print_validation_result(result)
        sys.exit(0 if result.valid else 1)

    if not result.valid:
        print_validation_result(result)
        sys.exit(1)

    cfg = result.config
    for warning in result.warnings:
        logger.warning(warning)

    if args.image:
        source = ImageFileSource(args.image)
    else:
        source = CameraSource(cfg.camera.source, cfg.camera.jpeg_quality)

    try:
        init_audio()
        player = FeedbackPlayer(cfg.audio.sounds_dir, cfg.audio.sounds)
        if isinstance(source, CameraSource):
            source.open()
    except (AudioError, CameraError) as e:
        logger.error(str(e))
        shutdown_audio()
        sys.exit(1)

    session = ScanSession(source, VisionClient(cfg.vision.model_dump()), player)

    interval = (
        args.interval
        if args.interval is not None
        else cfg.runtime.scan_interval_seconds
    )
    single = args.once or bool(args.image)

    exit_code = 0
    try:
        if single:
            print_banner("single scan")
            status = run_scan(session)
            exit_code = 1 if status is ScanStatus.FAILED else 0
        elif interval > 0:
            _setup_signal_handlers()
            print_banner(f"every {interval:g}s")
            run_periodic(session, interval)
        else:
            print_banner("manual")
            run_interactive(session)
    finally:
        player.close()
        source.close()
        shutdown_audio()
        logger.info("Shutdown complete")

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
