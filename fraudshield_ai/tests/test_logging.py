"""Tests for structured logging and metrics."""

import json
import logging
import sys

import pytest

from fraudshield_ai.pipelines.text_pipeline import analyze_text
from fraudshield_ai.utils.logging_config import (
    JSONFormatter,
    MetricsCollector,
    StructuredLogger,
    metrics,
    track_analysis,
)


class TestJSONFormatter:
    """Tests for JSON log output."""

    def test_record_fields(self):
        record = logging.LogRecord("fraudshield_ai.test", logging.INFO, __file__, 10, "hello", (), None)
        record.extra_data = {"risk_score": 42}
        data = json.loads(JSONFormatter().format(record))
        assert data["level"] == "INFO"
        assert data["logger"] == "fraudshield_ai.test"
        assert data["message"] == "hello"
        assert data["data"] == {"risk_score": 42}

    def test_exception_included(self):
        try:
            raise ValueError("bad")
        except ValueError:
            record = logging.LogRecord("x", logging.ERROR, __file__, 1, "failed", (), sys.exc_info())
        data = json.loads(JSONFormatter().format(record))
        assert data["exception"]["type"] == "ValueError"
        assert data["exception"]["message"] == "bad"


class TestStructuredLogger:
    """Tests for the keyword-argument logger."""

    def test_extra_data_attached(self, caplog):
        logger = StructuredLogger("fraudshield_ai.test")
        with caplog.at_level(logging.INFO, logger="fraudshield_ai.test"):
            logger.info("Message analyzed", classification="fraud")
        record = caplog.records[-1]
        assert record.getMessage() == "Message analyzed"
        assert record.extra_data == {"classification": "fraud"}

    def test_disabled_level_skipped(self, caplog):
        logger = StructuredLogger("fraudshield_ai.quiet")
        with caplog.at_level(logging.WARNING, logger="fraudshield_ai.quiet"):
            logger.debug("not shown")
        assert not [r for r in caplog.records if r.name == "fraudshield_ai.quiet"]


class TestMetrics:
    """Tests for the metrics collector and decorator."""

    def test_counters_and_timings(self):
        collector = MetricsCollector()
        collector.increment("a")
        collector.increment("a", 2)
        collector.timing("t", 0.5)
        collector.timing("t", 1.5)
        stats = collector.get_stats()
        assert stats["counters"] == {"a": 3}
        assert stats["timings"]["t"]["count"] == 2
        assert stats["timings"]["t"]["avg"] == 1.0

    def test_timings_are_bounded(self):
        collector = MetricsCollector(max_timings=5)
        for i in range(10):
            collector.timing("t", float(i))
        assert collector.get_stats()["timings"]["t"]["min"] == 5.0

    def test_track_analysis_counts_errors(self):
        @track_analysis("sample")
        def failing():
            raise RuntimeError("nope")

        with pytest.raises(RuntimeError):
            failing()
        counters = metrics.get_stats()["counters"]
        assert counters["analysis.sample.total"] == 1
        assert counters["analysis.sample.errors"] == 1

    def test_text_pipeline_is_tracked(self, sample_scam_text):
        result = analyze_text(sample_scam_text)
        assert result["classification"] == "fraud"
        counters = metrics.get_stats()["counters"]
        assert counters["analysis.text.total"] == 1
        assert counters["analysis.text.classification.fraud"] == 1
