"""
contest — in-memory model for a partially-updated contest feed.

## Layers
- contest.core — zero-IO contracts: grammar enums, id classifier, serde, errors.
- contest.model — entities (Award, Team), the in-memory Contest aggregate,
  settings, and logging setup.

## Notes
- Logging goes through loguru and is disabled for this package until
  `contest.model.log.setup_logging` is called.
"""

from loguru import logger

logger.disable("contest")
