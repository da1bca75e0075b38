import pytest

from instagram_client.application.connection import build_stages
from instagram_client.application.middleware.content_type import FixContentType
from instagram_client.application.middleware.mashify import Mashify
from instagram_client.application.middleware.oauth2 import OAuth2
from instagram_client.application.middleware.parse_json import ParseJson
from instagram_client.application.middleware.raise_http_error import RaiseHttpError
from instagram_client.application.middleware.url_encoded import UrlEncoded
from instagram_client.config import Settings
from instagram_client.domain.errors import NotFound, ParsingError, RateLimitExceeded, Unauthorized
from instagram_client.domain.mash import Mash
from instagram_client.factory import build_connection
from tests.unit._fakes_transport import FakeTransport


def make_settings(**overrides):
    base = dict(
        client_id="cid",
        client_secret="",
        access_token="tok",
        endpoint="https://api.instagram.com/v1/",
        format="json",
        adapter="httpx",
        proxy="",
        user_agent="test-agent",
        auth_placement="query",
        sign_requests=False,
    )
    base.update(overrides)
    return Settings(**base)


def stage_types(stages):
    return [type(s) for s in stages]


def test_stage_order_for_json():
    assert stage_types(build_stages(make_settings())) == [RaiseHttpError, OAuth2, UrlEncoded, Mashify, ParseJson, FixContentType]


def test_raw_mode_skips_parsing_stages():
    assert stage_types(build_stages(make_settings(), raw=True)) == [RaiseHttpError, OAuth2, UrlEncoded]


def test_non_json_format_skips_parser_but_keeps_mashify():
    assert stage_types(build_stages(make_settings(format="xml"))) == [RaiseHttpError, OAuth2, UrlEncoded, Mashify]


def test_get_returns_mash_and_sends_defaults():
    transport = FakeTransport(body='{"data": {"username": "kevin", "counts": {"media": 3}}}')
    conn = build_connection(make_settings(), transport=transport)
    result = conn.get("users/self", {"count": 2})
    assert isinstance(result, Mash)
    assert result.data.username == "kevin"
    assert result["data"]["counts"].media == 3
    sent = transport.sent[0]
    assert sent.url == "https://api.instagram.com/v1/users/self"
    assert sent.params == {"count": 2, "access_token": "tok"}
    assert sent.headers["Accept"] == "application/json; charset=utf-8"
    assert sent.headers["User-Agent"] == "test-agent"


def test_caller_headers_win_over_defaults():
    transport = FakeTransport()
    conn = build_connection(make_settings(), transport=transport)
    conn.get("users/self", headers={"user-agent": "mine"})
    assert transport.sent[0].headers["user-agent"] == "mine"
    assert "User-Agent" not in transport.sent[0].headers


def test_post_form_encodes_body_with_token():
    transport = FakeTransport(body='{"meta": {"code": 200}, "data": null}')
    conn = build_connection(make_settings(), transport=transport)
    result = conn.post("media/1/comments", {"text": "hi"})
    assert result.meta.code == 200
    assert result.data is None
    sent = transport.sent[0]
    assert sent.method == "POST"
    assert sent.body == "text=hi&access_token=tok"
    assert sent.headers["Content-Type"] == "application/x-www-form-urlencoded"


def test_list_body_is_mashified():
    conn = build_connection(make_settings(), transport=FakeTransport(body='[{"id": "1"}]'))
    assert conn.get("media/popular")[0].id == "1"


def test_mislabelled_json_is_still_parsed():
    transport = FakeTransport(body='{"a":1}', headers={"Content-Type": "text/javascript"})
    result = build_connection(make_settings(), transport=transport).get("x")
    assert result == {"a": 1}
    assert result.a == 1


def test_raw_mode_returns_body_unchanged():
    body = '{"data": {"id": "1"}}  '
    conn = build_connection(make_settings(), raw=True, transport=FakeTransport(body=body))
    assert conn.get("users/self") == body


@pytest.mark.parametrize("status,error", [(401, Unauthorized), (404, NotFound), (429, RateLimitExceeded)])
def test_error_payloads_are_parsed_before_raising(status, error):
    body = '{"meta": {"code": %d, "error_type": "APIError", "error_message": "nope"}}' % status
    conn = build_connection(make_settings(), transport=FakeTransport(status=status, body=body))
    with pytest.raises(error) as info:
        conn.get("users/self")
    assert info.value.status == status
    assert info.value.body.meta.error_message == "nope"
    assert str(info.value).endswith(f"{status}: APIError: nope")


@pytest.mark.parametrize("status", [204, 301, 302, 304])
def test_no_body_statuses(status):
    conn = build_connection(make_settings(), transport=FakeTransport(status=status, body="{broken"))
    assert conn.get("users/self") == "{broken"


def test_malformed_json_raises_parsing_error_before_status_check():
    conn = build_connection(make_settings(), transport=FakeTransport(status=500, body="{broken"))
    with pytest.raises(ParsingError):
        conn.get("users/self")


def test_empty_body_returns_none():
    conn = build_connection(make_settings(), transport=FakeTransport(body="   "))
    assert conn.get("users/self") is None


def test_client_id_used_without_token():
    transport = FakeTransport()
    build_connection(make_settings(access_token=""), transport=transport).get("media/popular")
    assert transport.sent[0].params == {"client_id": "cid"}


def test_endpoint_without_trailing_slash_and_leading_slash_path():
    transport = FakeTransport()
    conn = build_connection(make_settings(endpoint="https://api.instagram.com/v1"), transport=transport)
    conn.delete("/media/1/likes")
    assert transport.sent[0].url == "https://api.instagram.com/v1/media/1/likes"
    assert transport.sent[0].method == "DELETE"


def test_signed_requests_through_connection():
    transport = FakeTransport()
    conn = build_connection(make_settings(client_secret="s3cret", sign_requests=True), transport=transport)
    conn.get("users/self")
    assert "sig" in transport.sent[0].params


def test_context_manager_closes_transport():
    transport = FakeTransport()
    with build_connection(make_settings(), transport=transport) as conn:
        conn.get("users/self")
    assert transport.closed
