"""
Application Initialization
==========================
This module constructs the MVC (Model-View-Controller) architecture and starts
the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the session state (Model) and the data sources.
2. Instantiates the controller and the Main Window (View).
3. Kicks off the first role map request.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from polaris.application import create_app
from polaris.config import DEFAULT_PAGES_PATH, DEFAULT_ROLES_PATH
from polaris.controller.explorer import ExplorerController
from polaris.logging_config import setup_logging
from polaris.model.roles import MetricVector
from polaris.model.sources import JsonPageSource, JsonRoleSource
from polaris.model.state import SessionState
from polaris.view.main_window import MainWindow


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="polaris", description="Explore roles around your current one.")
    parser.add_argument("--roles", default=DEFAULT_ROLES_PATH, help="JSON file with the role batch")
    parser.add_argument("--pages", default=DEFAULT_PAGES_PATH, help="JSON file with role detail pages")
    parser.add_argument("--current-role", default="", help="Your current role")
    parser.add_argument(
        "--metrics", nargs=4, type=float, metavar=("TECHNICAL", "CREATIVE", "BUSINESS", "CUSTOMER"),
        help="Work-style metrics of your current role (0-10)",
    )
    parser.add_argument("--skills", nargs="*", default=[], help="Your current skills")
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    parser.add_argument("--log-file", default=None, help="Also write the log to this file")
    return parser


def build_state(args: argparse.Namespace) -> SessionState:
    metrics = MetricVector(*args.metrics) if args.metrics else None
    return SessionState(current_role=args.current_role, metrics=metrics, user_skills=list(args.skills))


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=logging.DEBUG if args.debug else logging.INFO, log_file=args.log_file)

    # 2. Create the Qt Application
    app = create_app(sys.argv[:1])

    # 3. Initialize the Model and the data sources
    state = build_state(args)
    controller = ExplorerController(state, JsonRoleSource(args.roles), JsonPageSource(args.pages))

    # 4. Initialize the Main Window
    window = MainWindow(state, controller)
    window.show()

    # 5. First role map request, then start the Event Loop
    controller.load_roles()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
