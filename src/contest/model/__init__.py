"""
contest.model — Entities, the in-memory aggregate, settings, and logging.

## Public API
- ContestObject, apply_patch — base patch/export/validate contract.
- Award, Team — concrete entity kinds.
- Contest — in-memory aggregate applying feed events.
- ModelSettings — runtime settings (env > TOML > defaults).
- setup_logging — loguru sink setup.

## Import DAG discipline
- Depends on stdlib, pydantic, loguru, and contest.core.*.

## Examples
```python
from contest.model import Award, Contest, Team

contest = Contest()
contest.add(Team(id="t1", name="Byte Me"))
award = Award(id="winner")
award.add("citation", "Contest Winner")
award.add("team_ids", '["t1"]')
award.validate(contest)  # None
award.to_json()  # '{"id":"winner","citation":"Contest Winner","team_ids":["t1"]}'
```
"""

from __future__ import annotations

from .award import Award
from .config import ModelSettings
from .contest import Contest
from .entity import ContestObject, TeamLookup, apply_patch
from .log import setup_logging
from .team import Team

__all__ = [
    "ContestObject",
    "TeamLookup",
    "apply_patch",
    "Award",
    "Team",
    "Contest",
    "ModelSettings",
    "setup_logging",
]
