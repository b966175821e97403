# ---------------------------------------------------------------------------
# File: telemetry.py
# Description:
#   Lightweight telemetry for pyactionmenu menu sessions.
#
#   MenuController reports:
#     - events   menu.opened, menu.closed
#     - counters menu.noop_open, menu.teardown_failed
#     - spans    menu.session_ms (open -> close, in whole milliseconds)
#
#   Backends are "sinks"; the facade never depends on a concrete backend.
#
# Notes:
#   - Safe to call when disabled (default).
#   - Spans are measured with an injectable clock so tests can pin durations.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/05/2026	Paul G. LeDuc				Initial coding / release
# 10/09/2026	Paul G. LeDuc				Session spans (start / span_ms)
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional, Protocol


Clock = Callable[[], float]


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class TelemetryEvent:
	name: str
	timestamp: float
	attrs: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class TelemetryMetric:
	name: str
	value: float
	attrs: Dict[str, Any] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Sinks
# ---------------------------------------------------------------------------

class TelemetrySink(Protocol):
	def emit_event(self, event: TelemetryEvent) -> None: ...
	def emit_metric(self, metric: TelemetryMetric) -> None: ...


class NullSink:
	def emit_event(self, event: TelemetryEvent) -> None:
		return

	def emit_metric(self, metric: TelemetryMetric) -> None:
		return


class LogSink:
	"""
	One INFO line per record on the given logger.
	"""

	def __init__(self, logger: logging.Logger) -> None:
		self._log = logger

	def emit_event(self, event: TelemetryEvent) -> None:
		self._log.info("telemetry.event name=%s attrs=%s", event.name, event.attrs)

	def emit_metric(self, metric: TelemetryMetric) -> None:
		self._log.info("telemetry.metric name=%s value=%s attrs=%s", metric.name, metric.value, metric.attrs)


class MemorySink:
	"""
	Keeps records in lists for inspection.
	"""

	def __init__(self) -> None:
		self.events: list[TelemetryEvent] = []
		self.metrics: list[TelemetryMetric] = []

	def emit_event(self, event: TelemetryEvent) -> None:
		self.events.append(event)

	def emit_metric(self, metric: TelemetryMetric) -> None:
		self.metrics.append(metric)

	def clear(self) -> None:
		self.events.clear()
		self.metrics.clear()


# ---------------------------------------------------------------------------
# Facade
# ---------------------------------------------------------------------------

class Telemetry:
	"""
	Telemetry facade handed to MenuController.

	A span is two calls apart: start() when a session opens, span_ms() when a
	key handler closes it.
	"""

	def __init__(self, enabled: bool, sink: TelemetrySink, *, clock: Clock = time.perf_counter) -> None:
		self._enabled = enabled
		self._sink = sink
		self._clock = clock

	def event(self, name: str, attrs: Optional[Mapping[str, Any]] = None) -> None:
		if self._enabled:
			self._sink.emit_event(TelemetryEvent(name, time.time(), dict(attrs or {})))

	def counter(self, name: str, value: float = 1, attrs: Optional[Mapping[str, Any]] = None) -> None:
		if self._enabled:
			self._sink.emit_metric(TelemetryMetric(name, float(value), dict(attrs or {})))

	def start(self) -> float:
		"""
		Clock reading to pass back into span_ms().
		"""
		return self._clock()

	def span_ms(self, name: str, started: float, attrs: Optional[Mapping[str, Any]] = None) -> None:
		elapsed = max(0.0, self._clock() - started)
		self.counter(name, int(elapsed * 1000.0), attrs)


# ---------------------------------------------------------------------------
# Global helpers
# ---------------------------------------------------------------------------

_telemetry: Optional[Telemetry] = None


def init_telemetry(cfg: Any, logger: Optional[logging.Logger] = None) -> Telemetry:
	"""
	Initialize the process-wide telemetry instance.

	Expected cfg keys:
		telemetry_enabled:	bool
		telemetry_sink:		"null" | "log"

	"log" without a logger falls back to "null".
	"""
	global _telemetry

	enabled = bool(cfg.get("telemetry_enabled", False))
	sink = _make_sink(str(cfg.get("telemetry_sink", "null")), logger) if enabled else NullSink()

	_telemetry = Telemetry(enabled, sink)
	return _telemetry


def get_telemetry() -> Telemetry:
	"""
	Return the process-wide telemetry instance (disabled until init).
	"""
	global _telemetry

	if _telemetry is None:
		_telemetry = Telemetry(False, NullSink())

	return _telemetry


def _make_sink(name: str, logger: Optional[logging.Logger]) -> TelemetrySink:
	name = name.strip().lower()
	if name == "log" and logger is not None:
		return LogSink(logger)
	return NullSink()
