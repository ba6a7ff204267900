"""Tests for endpoint descriptors and request descriptions."""

import pytest

from tweetkit import endpoints, statuses
from tweetkit.endpoints import EndpointSpec
from tweetkit.errors import InvalidFieldFormat, MissingRequiredField
from tweetkit.request import ParameterBuilder


def test_resolve_substitutes_id():
    assert endpoints.RETWEET.resolve(123) == "statuses/retweet/123.json"


def test_resolve_without_placeholder_ignores_id():
    assert endpoints.LOOKUP.resolve() == "statuses/lookup.json"
    assert endpoints.SHOW.resolve(5) == "statuses/show.json"


def test_resolve_validates_id():
    with pytest.raises(MissingRequiredField):
        endpoints.DESTROY.resolve()
    with pytest.raises(InvalidFieldFormat):
        endpoints.DESTROY.resolve("5")


def test_endpoint_spec_is_immutable():
    spec = EndpointSpec("GET", "statuses/lookup.json")
    with pytest.raises(AttributeError):
        spec.method = "POST"


def test_parameter_builder_skips_none():
    request = ParameterBuilder().add("a", 1).add("b", None).add("c", False).build("GET", "x")
    assert dict(request.parameters) == {"a": 1, "c": False}


def test_encoded_parameters_render_strings():
    request = statuses.build_update("hi", lat=37.5, long=-122.25, in_reply_to_status_id=9, trim_user=False)
    assert request.encoded_parameters() == {
        "status": "hi",
        "in_reply_to_status_id": "9",
        "lat": "37.5",
        "long": "-122.25",
        "display_coordinates": "true",
        "trim_user": "false",
    }


def test_encoded_parameters_leave_out_media():
    request = statuses.build_update_with_media("pic", b"bytes", trim_user=True)
    assert request.encoded_parameters() == {"status": "pic", "trim_user": "true"}


def test_encoded_coordinates_use_fixed_point():
    """Test that small coordinates are not sent in exponent form."""
    request = statuses.build_update("hi", lat=0.00001, long=1e-7)
    encoded = request.encoded_parameters()
    assert encoded["lat"] == "0.00001"
    assert encoded["long"] == "0.0000001"
    assert statuses.build_update("hi", lat=-45.0, long=12.123456789).encoded_parameters()["long"] == "12.12345679"


def test_request_descriptions_are_hashable():
    first = statuses.build_update("hi", lat=1.0, long=2.0)
    second = statuses.build_update("hi", lat=1.0, long=2.0)
    media = statuses.build_update_with_media("pic", b"img")
    assert hash(first) == hash(second)
    assert len({first, second, media}) == 2


def test_built_request_is_detached_from_builder():
    builder = ParameterBuilder().add("a", 1)
    request = builder.build("GET", "x")
    builder.add("b", 2)
    assert dict(request.parameters) == {"a": 1}
