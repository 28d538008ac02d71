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

from .pattern import VERSION_PATTERN, Span, extract, match_span
from .version import Shape, Version, parse, parse_version

__all__ = [
    "VERSION_PATTERN",
    "Shape",
    "Span",
    "Version",
    "extract",
    "match_span",
    "parse",
    "parse_version",
]
