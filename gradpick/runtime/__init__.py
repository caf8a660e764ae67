# Copyright (c) 2026 Gradpick
# SPDX-License-Identifier: MIT

"""
Picker session runtime for Gradpick.

Wraps the stateless parse/edit/serialize core in a session object that
owns the change callback, the diagnostic channel and the recent-color
history.
"""

from gradpick.runtime.config import PickerConfig
from gradpick.runtime.history import RecencyTracker
from gradpick.runtime.picker import (
    ColorPicker,
    Diagnostic,
    DiagnosticCode,
    PickerDetails,
)

__all__ = [
    "ColorPicker",
    "PickerConfig",
    "PickerDetails",
    "Diagnostic",
    "DiagnosticCode",
    "RecencyTracker",
]
