# main.py
import argparse
import sys

import structlog

from short_tracker.config.settings import get_settings
from short_tracker.data.data_manager import load_workers
from short_tracker.data.store import JsonFileStore, MemoryStore
from short_tracker.log import configure_logging

log = structlog.get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="short-tracker", description="Daily unrecorded/short penalty tracker")
    p.add_argument("--cli", action="store_true", help="console menu instead of the desktop window")
    p.add_argument("--data-dir", help="override SHORT_TRACKER_DATA_DIR")
    p.add_argument("--memory", action="store_true", help="keep data in memory only (nothing is written)")
    return p


def make_store(args, settings):
    if args.memory:
        return MemoryStore()
    return JsonFileStore(args.data_dir or settings.data_dir)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level)

    store = make_store(args, settings)
    # seeds the default roster on first launch
    load_workers(store, settings.default_worker_names)
    log.info("app_started", mode="cli" if args.cli else "gui",
             store=type(store).__name__, data_dir=str(getattr(store, "data_dir", "")))

    if args.cli:
        from short_tracker.cli.menu import main_menu
        main_menu(store, settings)
        return 0

    from PySide6.QtWidgets import QApplication
    from short_tracker.gui.main_window import MainWindow

    app = QApplication(sys.argv[:1])
    win = MainWindow(store, settings)
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
