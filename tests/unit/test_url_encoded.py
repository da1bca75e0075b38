from instagram_client.application.middleware.url_encoded import UrlEncoded
from instagram_client.domain.http import Request

URL = "https://api.instagram.com/v1/media/1/comments"


def test_mapping_body_is_form_encoded():
    req = UrlEncoded().process_request(Request("POST", URL, body={"text": "nice pic", "access_token": "tok"}))
    assert req.body == "text=nice+pic&access_token=tok"
    assert req.headers["Content-Type"] == "application/x-www-form-urlencoded"


def test_string_body_is_left_alone():
    req = Request("POST", URL, body="already=encoded")
    assert UrlEncoded().process_request(req) is req


def test_other_content_type_is_respected():
    req = Request("POST", URL, headers={"Content-Type": "application/json"}, body={"a": 1})
    assert UrlEncoded().process_request(req) is req


def test_sequence_values_are_expanded():
    req = UrlEncoded().process_request(Request("PUT", URL, body={"ids": ["1", "2"]}))
    assert req.body == "ids=1&ids=2"
