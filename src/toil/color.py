# SPDX-License-Identifier: MIT

DEFAULT_PROJECT_COLOR = "#3b82f6"
DEFAULT_TAG_COLOR = "#10b981"

# Projects created while importing CSV rows
IMPORTED_PROJECT_COLOR = "#999999"

# Report buckets that have no resolvable project
UNKNOWN_PROJECT_COLOR = "#999999"
UNASSIGNED_PROJECT_COLOR = "#cccccc"

WORK_COLOR = "dodger_blue1"
BREAK_COLOR = "dark_orange"
WORKING_BREAK_COLOR = "sky_blue1"
