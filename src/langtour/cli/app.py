# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Command line entry point for the ``langtour`` executable."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from ..config import TourConfig, load_config
from ..errors import ConfigError
from ..formatting import format_report
from ..runner import run
from ..runtime.logging import LEVEL_NAMES, configure_logging, get_logger
from ..tour import default_registry


def main(argv: Sequence[str] | None = None, *, stdout: TextIO | None = None) -> int:
    """Run the tour and print its report.

    Returns 0 whenever the tour ran, including when demonstrations failed;
    failures are part of the report. An unusable configuration only costs the
    file and environment settings: a warning goes to stderr and the tour runs
    with the command line flags alone. A non-zero code means argparse rejected the command line.
    """

    parser = _build_parser()
    try:
        args = parser.parse_args(list(argv) if argv is not None else None)
    except SystemExit as exc:  # argparse exits with code 2 on errors
        code = exc.code if isinstance(exc.code, int) else 2
        return int(code)

    try:
        config = load_config(
            Path(args.config) if args.config is not None else None,
            {"log_level": args.log_level, "json_logs": args.json_logs},
        )
    except (ConfigError, OSError) as error:
        print(
            f"langtour: ignoring invalid configuration: {error}", file=sys.stderr
        )
        config = TourConfig(
            log_level=args.log_level, json_logs=bool(args.json_logs)
        )

    # The environment was already folded into ``config`` by load_config.
    configure_logging(level=config.log_level, json_mode=config.json_logs, env={})
    logger = get_logger(__name__)

    registry = default_registry()
    logger.info(
        "Running tour.",
        event="langtour.cli.run",
        context={"demonstrations": len(registry)},
    )
    report = run(registry)

    out = stdout if stdout is not None else sys.stdout
    _ = out.write(format_report(report))
    out.flush()
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="langtour",
        description="Run every language-feature demonstration and print the results.",
    )
    _ = parser.add_argument(
        "--log-level",
        choices=tuple(LEVEL_NAMES),
        default=None,
        help="Override the log level written to stderr.",
    )
    _ = parser.add_argument(
        "--json-logs",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Emit structured JSON logs (disable with --no-json-logs).",
    )
    _ = parser.add_argument(
        "--config",
        default=None,
        help="Path to a TOML or YAML configuration file "
        "(default: ~/.config/langtour/config.toml, if present).",
    )
    return parser


__all__ = ["main"]
