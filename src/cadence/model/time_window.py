# SPDX-License-Identifier: MIT

from typing import TypeAlias, TypedDict

# "from" is a keyword, so the functional form is required
HourRange = TypedDict("HourRange", {"from": int, "to": int})

# Weekday index (0 = Sunday ... 6 = Saturday) to opening hours
WorkingHours: TypeAlias = dict[int, HourRange]

# Global hour range rendered on the day and week time axes
VisibleHours: TypeAlias = HourRange
