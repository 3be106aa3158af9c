"""Domain logic over normalized forecasts.

Dependency rule: analysis/ reads ``schemas`` models only. It never fetches
data or produces HTML.

Modules:
  - advisories: threshold rules + best outdoor window -> ordered AdvisoryItems

Adding a rule
-------------
1. Write ``_my_rule(snapshot) -> AdvisoryItem | None`` in ``advisories.py``.
2. Insert it into ``RULES`` at the position it should be displayed.
3. Add boundary tests in ``tests/test_advisories.py``.
"""

from weather_dashboard.analysis.advisories import (
    best_outdoor_index,
    generate_advisories,
    score_hour,
)

__all__ = ["best_outdoor_index", "generate_advisories", "score_hour"]
