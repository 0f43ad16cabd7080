"""
Pytest configuration and shared fixtures for trace visualizer tests.
"""
import json
import pytest
from pathlib import Path

from trace_visualizer import TraceVisualizer


SAMPLE_TRACE_PATH = Path(__file__).parent.parent / "sample-trace.json"


@pytest.fixture
def simple_trace():
    """Two-span trace in the {spans: [...]} shape with snake_case fields."""
    return {
        "spans": [
            {"span_id": "a", "name": "root", "start_time": 0, "end_time": 100},
            {"span_id": "b", "parent_span_id": "a", "name": "child", "start_time": 10, "end_time": 50},
        ]
    }


@pytest.fixture
def elastic_export():
    """OpenSearch/Elasticsearch hits with flattened attribute keys."""
    return [
        {
            "_index": "otel-v1-apm-span-000001",
            "_source": {
                "traceId": "trace-es-1",
                "spanId": "gateway-1",
                "parentSpanId": "",
                "name": "GET /api/orders",
                "serviceName": "gateway",
                "kind": "SPAN_KIND_SERVER",
                "startTime": "2024-01-15T10:30:00.000Z",
                "endTime": "2024-01-15T10:30:00.250Z",
                "durationInNanos": 250000000,
                "status.code": 0,
                "span.attributes.http@method": "GET",
                "span.attributes.http@status_code": 200,
                "resource.attributes.service@name": "gateway",
            }
        },
        {
            "_index": "otel-v1-apm-span-000001",
            "_source": {
                "traceId": "trace-es-1",
                "spanId": "orders-1",
                "parentSpanId": "gateway-1",
                "name": "SELECT orders",
                "kind": "SPAN_KIND_CLIENT",
                "startTime": "2024-01-15T10:30:00.050Z",
                "endTime": "2024-01-15T10:30:00.150Z",
                "status": {"code": 2},
                "span.attributes.db@statement": "SELECT * FROM orders",
                "resource.attributes.service@name": "order-service",
            }
        },
    ]


@pytest.fixture
def otlp_trace():
    """Minimal OTLP export with two services."""
    return {
        "resourceSpans": [
            {
                "resource": {
                    "attributes": [
                        {"key": "service.name", "value": {"stringValue": "user-service"}}
                    ]
                },
                "scopeSpans": [
                    {
                        "spans": [
                            {
                                "traceId": "abc123",
                                "spanId": "span1",
                                "parentSpanId": "",
                                "name": "GET /api/users",
                                "kind": 2,
                                "startTimeUnixNano": "1000000000",
                                "endTimeUnixNano": "2000000000",
                                "attributes": [
                                    {"key": "http.method", "value": {"stringValue": "GET"}},
                                    {"key": "http.status_code", "value": {"intValue": "200"}},
                                ],
                                "status": {"code": 1}
                            }
                        ]
                    }
                ]
            },
            {
                "resource": {
                    "attributes": [
                        {"key": "service.name", "value": {"stringValue": "database-service"}}
                    ]
                },
                "instrumentationLibrarySpans": [
                    {
                        "spans": [
                            {
                                "traceId": "abc123",
                                "spanId": "span2",
                                "parentSpanId": "span1",
                                "name": "SELECT users",
                                "kind": 3,
                                "startTimeUnixNano": "1200000000",
                                "endTimeUnixNano": "1500000000",
                                "attributes": [
                                    {"key": "db.system", "value": {"stringValue": "postgresql"}},
                                ]
                            }
                        ]
                    }
                ]
            }
        ]
    }


@pytest.fixture
def nested_trace():
    """
    Flat array trace:

        root (0-100)
        ├── auth (5-20)
        └── api (20-90)
            ├── db-query (30-60)
            └── cache-get (25-28)
        orphan (40-45, parent missing)
    """
    return [
        {"spanId": "root", "name": "GET /", "serviceName": "frontend", "startTime": 0, "endTime": 100},
        {"spanId": "api", "parentSpanId": "root", "name": "call api", "serviceName": "frontend",
         "startTime": 20, "endTime": 90},
        {"spanId": "auth", "parentSpanId": "root", "name": "authorize", "serviceName": "auth-service",
         "startTime": 5, "endTime": 20},
        {"spanId": "db-query", "parentSpanId": "api", "name": "SELECT items", "serviceName": "api-service",
         "startTime": 30, "endTime": 60, "span.attributes.db@system": "postgres"},
        {"spanId": "cache-get", "parentSpanId": "api", "name": "GET item", "serviceName": "api-service",
         "startTime": 25, "endTime": 28},
        {"spanId": "orphan", "parentSpanId": "missing", "name": "late callback",
         "serviceName": "worker", "startTime": 40, "endTime": 45},
    ]


@pytest.fixture
def loaded_visualizer(nested_trace):
    """TraceVisualizer with nested_trace loaded."""
    visualizer = TraceVisualizer()
    visualizer.load(nested_trace)
    return visualizer


@pytest.fixture
def temp_json_file(tmp_path):
    """Create a temporary JSON file and return a helper function."""
    def _create_file(data):
        file_path = tmp_path / f"test_{id(data)}.json"
        with open(file_path, "w") as f:
            json.dump(data, f)
        return str(file_path)

    return _create_file


@pytest.fixture
def sample_trace_path():
    """Path to the bundled sample trace."""
    if not SAMPLE_TRACE_PATH.exists():
        pytest.skip("sample-trace.json not found")
    return str(SAMPLE_TRACE_PATH)
