"""Command-line entry point: load a module file, adjust it and link it."""

from __future__ import annotations

import argparse
import copy
import json
import logging
import shutil
import sys
from pathlib import Path
from typing import List, Optional, Union

from .ir import LinkContext
from .parse import ParseError, RawConstant, RawJsolModule
from .value import BoolValue

_LOGGER_NAME = "jsol"


def modify_script(module: RawJsolModule) -> None:
    """Replace the module's constants with a single ``DEBUG = true``."""
    module.constants.clear()
    module.constants.append(RawConstant("DEBUG", BoolValue(True)))


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "target": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


def _close_logging(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def install_logging(out_dir: Union[str, Path]) -> logging.Logger:
    """Log to a plain file, a JSON-lines file and, at info level, to stderr."""
    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(_LOGGER_NAME)
    _close_logging(logger)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    text_handler = logging.FileHandler(out / "output.log", mode="w", encoding="utf-8")
    text_handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    )

    json_handler = logging.FileHandler(out / "output.json", mode="w", encoding="utf-8")
    json_handler.setFormatter(_JsonFormatter())

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(logging.INFO)
    console.setFormatter(logging.Formatter("%(levelname)s %(message)s"))

    for handler in (json_handler, text_handler, console):
        logger.addHandler(handler)
    return logger


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="jsol", description="Load and link a module file.")
    parser.add_argument("file", type=Path)
    parser.add_argument("-o", "--optimize", action="store_true")
    return parser


def _run(args: argparse.Namespace, logger: logging.Logger) -> int:
    path: Path = args.file
    raw_program = RawJsolModule.loads(path.read_text(encoding="utf-8"))

    cloned = copy.deepcopy(raw_program)
    modify_script(cloned)
    if cloned != raw_program:
        path.write_text(cloned.dumps(), encoding="utf-8")
        logger.info("rewrote %s", path)
        raw_program = cloned

    linker = LinkContext()
    linker.resolve_module(raw_program)
    logger.debug("linked %d module(s)", len(linker.modules))

    print(f"linker = {linker!r}", file=sys.stderr)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    out_dir = Path("out")
    shutil.rmtree(out_dir, ignore_errors=True)
    out_dir.mkdir(parents=True, exist_ok=True)
    logger = install_logging(out_dir)
    try:
        args = _build_parser().parse_args(argv)
        return _run(args, logger)
    except (OSError, ParseError) as exc:
        logger.error("%s", exc)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    finally:
        _close_logging(logger)


if __name__ == "__main__":
    sys.exit(main())