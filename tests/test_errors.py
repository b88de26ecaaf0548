import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from mochi_mcp.errors import (
    ArgumentValidationError,
    FailureKind,
    InvalidResource,
    RemoteApiError,
    RemoteTimeoutError,
    SchemaViolation,
    classify,
    unknown_tool,
)


def test_remote_api_error_joins_mapping_values():
    error = RemoteApiError({"deck-id": "is required", "content": ["is too long", "is blank"]}, 422)

    assert error.message == "is required, is too long, is blank"
    assert error.status_code == 422


def test_remote_api_error_joins_list():
    error = RemoteApiError(["first", "second"], 400)

    assert str(error) == "first, second"


def test_classify_tags_each_kind():
    assert classify(ArgumentValidationError(["field 'a' is missing"])).kind is FailureKind.VALIDATION
    assert classify(SchemaViolation(["field 'id' is missing"])).kind is FailureKind.SCHEMA_VIOLATION
    assert classify(RemoteApiError(["boom"], 500)).kind is FailureKind.REMOTE_API
    assert classify(RemoteTimeoutError(5)).kind is FailureKind.REMOTE_API
    assert classify(RuntimeError("unexpected")).kind is FailureKind.UNKNOWN


def test_render_uses_the_tag():
    assert classify(RemoteApiError(["boom"], 500)).render() == "Mochi API error (500): boom"
    assert classify(RemoteTimeoutError(1.5)).render() == (
        "Mochi API error (timeout): request timed out after 1.5s"
    )
    assert classify(ValueError()).render() == "Error: ValueError"
    assert unknown_tool("nope").render() == "Unknown tool: nope"


def test_invalid_resource_names_the_uri():
    error = InvalidResource("mochi://bogus")

    assert error.uri == "mochi://bogus"
    assert str(error) == "Invalid resource URI: mochi://bogus"
