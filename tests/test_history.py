"""Tests for the analysis history buffer and JSON export."""

import json
import os
from datetime import datetime, timedelta, timezone

import pytest

from hydroflow.analysis import ChannelInputs, analyze
from hydroflow.history import AnalysisHistory, export_document, save_document

T0 = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


def make_result(Q):
    return analyze(ChannelInputs(Q=Q, b=1.5, S0=0.001, n=0.025, y1=0.2))


@pytest.fixture
def history():
    h = AnalysisHistory()
    for k in range(3):
        h.add(make_result(1.0 + k), timestamp=T0 + timedelta(minutes=k))
    return h


class TestAnalysisHistory:

    def test_newest_first(self, history):
        assert [entry.result.inputs.Q for entry in history] == [3.0, 2.0, 1.0]
        assert history.latest().result.inputs.Q == 3.0

    def test_keeps_twenty_most_recent(self):
        h = AnalysisHistory()
        for k in range(21):
            h.add(make_result(0.5 + 0.1 * k))

        assert len(h) == 20
        assert h.maxlen == 20
        assert h[0].result.inputs.Q == pytest.approx(0.5 + 0.1 * 20)
        assert h[-1].result.inputs.Q == pytest.approx(0.5 + 0.1 * 1)

    def test_custom_size(self):
        h = AnalysisHistory(maxlen=2)
        for Q in [1.0, 2.0, 3.0]:
            h.add(make_result(Q))
        assert [entry.result.inputs.Q for entry in h] == [3.0, 2.0]

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            AnalysisHistory(maxlen=0)

    def test_latest_on_empty(self):
        with pytest.raises(IndexError):
            AnalysisHistory().latest()

    def test_clear(self, history):
        history.clear()
        assert len(history) == 0

    def test_default_timestamp_is_utc(self):
        entry = AnalysisHistory().add(make_result(1.0))
        assert entry.timestamp.tzinfo is timezone.utc

    def test_to_dataframe(self, history):
        df = history.to_dataframe()
        assert len(df) == 3
        assert df.index.name == 'timestamp'
        assert list(df['Q']) == [3.0, 2.0, 1.0]
        assert {'yn', 'yc', 'Frn', 'regime'} <= set(df.columns)

    def test_empty_dataframe(self):
        assert AnalysisHistory().to_dataframe().empty


class TestExport:

    def test_document_shape(self, history):
        inputs = history.latest().result.inputs
        doc = export_document(inputs, history, now=T0)

        assert doc['title'] == 'HydroFlow Analysis Results'
        assert doc['timestamp'] == '2026-10-19T12:00:00+00:00'
        assert doc['version'] == '2.0'
        assert doc['inputs'] == {'Q': 3.0, 'b': 1.5, 'S0': 0.001, 'n': 0.025, 'y1': 0.2}
        assert len(doc['history']) == 3
        assert doc['history'][0]['timestamp'] == (T0 + timedelta(minutes=2)).isoformat()

    def test_document_is_json_serializable(self, history):
        doc = export_document(history.latest().result.inputs, history)
        assert json.loads(json.dumps(doc))['version'] == '2.0'

    def test_save_document(self, history, tmp_path):
        folder = tmp_path / 'exports'
        doc = export_document(history.latest().result.inputs, history, now=T0)
        path = save_document(doc, str(folder))

        assert os.path.basename(path) == f"hydroflow-analysis-{int(T0.timestamp() * 1000)}.json"
        with open(path, encoding='utf-8') as file:
            assert json.load(file) == doc
