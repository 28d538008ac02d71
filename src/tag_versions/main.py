# *******************************************************************************
# Copyright (c) 2025 Contributors to the Eclipse Foundation
#
# See the NOTICE file(s) distributed with this work for additional
# information regarding copyright ownership.
#
# This program and the accompanying materials are made available under the
# terms of the Apache License Version 2.0 which is available at
# https://www.apache.org/licenses/LICENSE-2.0
#
# SPDX-License-Identifier: Apache-2.0
# *******************************************************************************

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path

from .gh_logging import Logger
from .version import Version, parse_version

log = Logger(__name__)


@dataclass
class Label:
    text: str
    # Where the label was read from, for annotations; None for CLI arguments
    file: Path | None = None
    line: int | None = None


def parse_args(args: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Extract, classify and order versions found in tags and labels."
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_parse = sub.add_parser("parse", help="Show the version found in each label.")
    p_parse.add_argument("labels", nargs="+")

    p_sort = sub.add_parser("sort", help="Sort labels by the version they carry.")
    p_sort.add_argument(
        "--reverse",
        action="store_true",
        help="Highest version first.",
    )
    p_sort.add_argument(
        "--file",
        type=Path,
        default=None,
        help="Read additional labels from this file, one per line; "
        "blank lines and lines starting with '#' are ignored.",
    )
    p_sort.add_argument("labels", nargs="*")

    p_compare = sub.add_parser("compare", help="Compare the versions in two labels.")
    p_compare.add_argument("left")
    p_compare.add_argument("right")

    return parser.parse_args(args)


def read_labels(path: Path) -> list[Label]:
    if not path.is_file():
        log.fatal(f"Labels file {path} does not exist")

    labels: list[Label] = []
    with open(path) as f:
        for lineno, raw in enumerate(f, start=1):
            text = raw.strip()
            if not text or text.startswith("#"):
                continue
            labels.append(Label(text=text, file=path, line=lineno))
    return labels


def try_parse_label(label: Label) -> Version | None:
    """Parse a label, warning (with its location, if known) when it has no version."""
    version = parse_version(label.text)
    if version is None:
        log.warning(
            f"'{label.text}' does not contain a version", file=label.file, line=label.line
        )
    else:
        log.debug(f"'{label.text}' -> {version!r}")
    return version


def sort_labels(labels: list[Label], reverse: bool = False) -> list[tuple[Label, Version]]:
    """Sort labels by version; labels without a version are reported and dropped.

    Labels carrying equal versions keep their input order.
    """
    parsed: list[tuple[Label, Version]] = []
    for label in labels:
        if version := try_parse_label(label):
            parsed.append((label, version))
    return sorted(parsed, key=lambda lv: lv[1], reverse=reverse)


def compare_labels(left: Label, right: Label) -> str | None:
    lv = try_parse_label(left)
    rv = try_parse_label(right)
    if lv is None or rv is None:
        return None
    if lv < rv:
        return "<"
    if lv > rv:
        return ">"
    return "=="


def main(args: list[str]) -> None:
    """Entry point for the tag-versions command.

    Every label is processed; if any of them had no version the run
    fails at the end with a non-zero exit code.
    """
    p = parse_args(args)

    if p.command == "parse":
        for text in p.labels:
            if version := try_parse_label(Label(text)):
                print(f"{text} -> {version} ({version.shape.value})")

    elif p.command == "sort":
        labels = [Label(text) for text in p.labels]
        if p.file:
            labels += read_labels(p.file)
        if not labels:
            log.fatal("No labels given; pass labels as arguments or use --file.")
        for label, _ in sort_labels(labels, reverse=p.reverse):
            print(label.text)

    elif p.command == "compare":
        op = compare_labels(Label(p.left), Label(p.right))
        if op:
            print(f"{p.left} {op} {p.right}")

    if log.warnings:
        log.fatal(f"Completed with {len(log.warnings)} warnings.")


def run() -> None:
    main(args=sys.argv[1:])


if __name__ == "__main__":
    run()
