import base64
import sys
from pathlib import Path

import httpx
import pytest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from mochi_mcp.errors import RemoteApiError, RemoteTimeoutError, SchemaViolation
from mochi_mcp.schemas import CreateCardArgs, ListCardsArgs, ListDecksArgs, ListTemplatesArgs, UpdateCardArgs
from mochi_mcp.services import MochiClient
from mochi_mcp.services.client import basic_auth_header

from _fake_mochi import CARD, TEMPLATE, TOKEN, FakeMochi, deck


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def fake():
    return FakeMochi()


def test_basic_auth_header_has_empty_password():
    expected = base64.b64encode(b"secret:").decode("ascii")

    assert basic_auth_header("secret") == f"Basic {expected}"


def test_client_rejects_empty_token():
    with pytest.raises(ValueError):
        MochiClient("   ")


def test_client_normalizes_base_url():
    client = MochiClient(TOKEN, base_url="https://example.test/api")

    assert client.base_url == "https://example.test/api/"


@pytest.mark.anyio
async def test_create_card_posts_once_with_auth(fake):
    fake.route("POST", "/cards", body=CARD)
    client = fake.client()
    args = CreateCardArgs.model_validate({"content": "Q\n---\nA", "deck-id": "deck-1"})

    card = await client.create_card(args)

    assert card.id == "card-1"
    assert len(fake.requests) == 1
    request = fake.last
    assert request.method == "POST"
    assert str(request.url) == "https://app.mochi.cards/api/cards"
    assert request.headers["Authorization"] == basic_auth_header(TOKEN)
    assert request.headers["Content-Type"] == "application/json"
    assert fake.body() == {"content": "Q\n---\nA", "deck-id": "deck-1"}


@pytest.mark.anyio
async def test_update_card_posts_to_card_url(fake):
    fake.route("POST", "/cards/abc", body={**CARD, "id": "abc", "trashed?": "true"})
    client = fake.client()
    args = UpdateCardArgs.model_validate({"card-id": "abc", "trashed?": "true"})

    card = await client.update_card(args)

    assert card.id == "abc"
    assert fake.last.method == "POST"
    assert fake.body() == {"trashed?": "true"}


@pytest.mark.anyio
async def test_card_id_is_quoted_in_path(fake):
    client = fake.client()

    with pytest.raises(RemoteApiError) as excinfo:
        await client.get_card("a/b")

    assert excinfo.value.status_code == 404
    assert fake.last.url.raw_path == b"/api/cards/a%2Fb"


@pytest.mark.anyio
async def test_get_card(fake):
    fake.route("GET", "/cards/card-1", body=CARD)

    card = await fake.client().get_card("card-1")

    assert card.name == "Capital of France"


@pytest.mark.anyio
async def test_list_decks_filters_archived_and_keeps_order(fake):
    docs = [
        deck("d1", "One", 1),
        deck("d2", "Two", 2, archived=True),
        deck("d3", "Three", 3, archived=False),
        deck("d4", "Four", 4, archived=True),
        deck("d5", "Five", 5),
    ]
    fake.route("GET", "/decks", body={"bookmark": "bm", "docs": docs})

    response = await fake.client().list_decks()

    assert [item.id for item in response.docs] == ["d1", "d3", "d5"]
    assert fake.last.url.query == b""


@pytest.mark.anyio
async def test_list_cards_passes_params_and_returns_bookmark(fake):
    fake.route("GET", "/cards", body={"bookmark": "bm-2", "docs": [CARD, {**CARD, "id": "card-2"}]})
    args = ListCardsArgs.model_validate({"deck-id": "deck-1", "limit": 25, "bookmark": "bm-1"})

    response = await fake.client().list_cards(args)

    params = fake.last.url.params
    assert params["deck-id"] == "deck-1"
    assert params["limit"] == "25"
    assert params["bookmark"] == "bm-1"
    assert response.bookmark == "bm-2"
    assert [card.id for card in response.docs] == ["card-1", "card-2"]


@pytest.mark.anyio
async def test_list_decks_and_templates_pass_bookmark_through(fake):
    fake.route("GET", "/decks", body={"bookmark": "deck-next", "docs": []})
    fake.route("GET", "/templates", body={"bookmark": "tmpl-next", "docs": [TEMPLATE]})
    client = fake.client()

    decks = await client.list_decks(ListDecksArgs(bookmark="opaque/+="))
    assert fake.last.url.params["bookmark"] == "opaque/+="
    templates = await client.list_templates(ListTemplatesArgs(bookmark="t-1"))
    assert fake.last.url.params["bookmark"] == "t-1"

    assert decks.bookmark == "deck-next"
    assert templates.bookmark == "tmpl-next"
    assert templates.docs[0].fields["back"].options.multi_line is True


@pytest.mark.anyio
async def test_get_template(fake):
    fake.route("GET", "/templates/tmpl-1", body=TEMPLATE)

    template = await fake.client().get_template("tmpl-1")

    assert template.name == "Basic"
    assert sorted(template.fields) == ["back", "name"]


@pytest.mark.anyio
async def test_object_error_body_becomes_remote_api_error(fake):
    fake.route("POST", "/cards", status=422, body={"deck-id": "is required"})
    args = CreateCardArgs.model_validate({"content": "Q", "deck-id": "missing"})

    with pytest.raises(RemoteApiError) as excinfo:
        await fake.client().create_card(args)

    assert excinfo.value.status_code == 422
    assert "is required" in excinfo.value.message
    assert excinfo.value.errors == {"deck-id": "is required"}


@pytest.mark.anyio
async def test_list_error_body_is_joined(fake):
    fake.route("GET", "/decks", status=400, body=["Invalid bookmark", "Try again"])

    with pytest.raises(RemoteApiError) as excinfo:
        await fake.client().list_decks()

    assert excinfo.value.status_code == 400
    assert excinfo.value.message == "Invalid bookmark, Try again"


@pytest.mark.anyio
async def test_plain_text_error_body(fake):
    fake.route("GET", "/templates", status=502, body="Bad gateway")

    with pytest.raises(RemoteApiError) as excinfo:
        await fake.client().list_templates()

    assert excinfo.value.status_code == 502
    assert excinfo.value.message == "Bad gateway"


@pytest.mark.anyio
async def test_timeout_becomes_remote_timeout_error(fake):
    def _timeout(request):
        raise httpx.ReadTimeout("timed out", request=request)

    fake.route_handler("GET", "/decks", _timeout)

    with pytest.raises(RemoteTimeoutError) as excinfo:
        await fake.client(timeout=2).list_decks()

    assert excinfo.value.status_code is None
    assert excinfo.value.message == "request timed out after 2s"


@pytest.mark.anyio
async def test_network_errors_propagate(fake):
    def _refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    fake.route_handler("GET", "/decks", _refuse)

    with pytest.raises(httpx.ConnectError):
        await fake.client().list_decks()


@pytest.mark.anyio
async def test_non_json_success_body_is_a_schema_violation(fake):
    fake.route("GET", "/cards", body="<html>maintenance</html>")

    with pytest.raises(SchemaViolation):
        await fake.client().list_cards()


@pytest.mark.anyio
async def test_malformed_card_is_a_schema_violation(fake):
    fake.route("POST", "/cards", body={"status": "ok"})
    args = CreateCardArgs.model_validate({"content": "Q", "deck-id": "deck-1"})

    with pytest.raises(SchemaViolation) as excinfo:
        await fake.client().create_card(args)

    assert "field 'id' is missing" in excinfo.value.messages
