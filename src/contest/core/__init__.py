"""
Core package aggregator for contest-model contracts (grammar, classifier, serde, errors, typing).

## Contracts (single source of truth)
- Grammar — entity kinds, display modes, identifier alphabet, lookup helpers.
- Classify — ordered id templates that recover an award's sub-kind from its id.
- Serde — field coercion (string arrays, booleans, strings) and key/value JSON emission.
- Errors — CodecError, UnknownFieldError, ConfigError.
- Typing — id NewTypes and patch aliases.

## Notes
- Zero-IO policy: stdlib only; no file/network IO and no logging.
- Naming policy: enum `.value` and feed field names are lower_snake.
- Coercion errors propagate; nothing in core swallows them.

## Downstream usage
- contest.model.entity — base patch/export/validate contract built on serde and grammar.
- contest.model.award — uses `classify` for `award_type`, `grammar.DisplayMode` for display modes.
- contest.model.team — uses serde array coercion for group ids.

## Examples
```python
from contest.core.classify import MEDAL, award_id, award_type_of
award_id(MEDAL, "gold")  # 'gold-medal'
award_type_of("gold-medal") is MEDAL  # True

from contest.core.serde import parse_string_array, encode_string_array
encode_string_array(parse_string_array('["t1","t2"]'))  # '["t1","t2"]'
```
"""
