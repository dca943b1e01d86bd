"""Pattern ingress -- decode detector payloads into validated patterns.

Detectors hand over a JSON document (or the already-decoded value): a list of
pattern objects, a single pattern object, or ``{"patterns": [...]}``. Each
entry is validated on its own. An entry that fails validation is returned as
the error it raised, in its position, so ``generate_batch`` reports it at that
index instead of the whole payload being dropped.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from orb_insights.errors import EmptyBatchItem, InsightError
from orb_insights.models import Pattern, coerce_pattern

log = logging.getLogger(__name__)


def _entries(data: Any) -> list[Any]:
	if isinstance(data, Mapping):
		if "patterns" in data:
			if not isinstance(data["patterns"], list):
				raise EmptyBatchItem("'patterns' must be a list", data)
			return list(data["patterns"])
		return [data]
	if isinstance(data, list):
		return list(data)
	raise EmptyBatchItem(f"expected a pattern list or object, got {type(data).__name__}", data)


def decode_patterns(payload: str | bytes | list[Any] | Mapping[str, Any]) -> list[Pattern | InsightError]:
	"""Decode a detector payload into one Pattern or InsightError per entry.

	Raises EmptyBatchItem when the payload as a whole is unusable (invalid
	JSON, or a top-level value that is neither a list nor an object).
	"""
	data: Any = payload
	if isinstance(payload, (str, bytes)):
		try:
			data = json.loads(payload)
		except json.JSONDecodeError as exc:
			raise EmptyBatchItem(f"payload is not valid JSON: {exc.msg}") from exc

	decoded: list[Pattern | InsightError] = []
	for index, entry in enumerate(_entries(data)):
		try:
			decoded.append(coerce_pattern(entry))
		except InsightError as exc:
			log.debug("Payload entry %d rejected: %s", index, exc)
			decoded.append(exc)
	return decoded


def valid_patterns(decoded: list[Pattern | InsightError]) -> list[Pattern]:
	return [item for item in decoded if isinstance(item, Pattern)]
