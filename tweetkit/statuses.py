"""
Statuses Request Builders
Turn typed call arguments into RequestDescriptions for the statuses endpoints.

Every builder is a pure function: it validates its arguments, raises
MissingRequiredField or InvalidFieldFormat on bad input, and otherwise returns
a fresh RequestDescription. Arguments left as None are never sent.
"""
from typing import Iterable, Optional

from . import endpoints
from .errors import MissingRequiredField
from .request import ParameterBuilder, RequestDescription
from .utils import (
    join_ids,
    require,
    validate_align,
    validate_bool,
    validate_coordinate,
    validate_int,
    validate_media,
    validate_text,
    validate_tweet_id,
    validate_tweet_ids,
    validate_url,
)

MEDIA_FIELD = "media[]"
# Historical key name; the API documents omit_script.
OMIT_SCRIPT_KEY = "omit_scipt"


def _optional(validator, field, value, *args, **kwargs):
    if value is None:
        return None
    return validator(field, value, *args, **kwargs)


def _add_geo(params: ParameterBuilder, lat, long, place_id) -> None:
    # place_id wins; lat/long only count when both are present
    if place_id is not None:
        params.add("place_id", place_id)
        params.add("display_coordinates", True)
    elif lat is not None and long is not None:
        params.add("lat", lat)
        params.add("long", long)
        params.add("display_coordinates", True)


def _validate_update_args(status, in_reply_to_status_id, lat, long, place_id, trim_user):
    status = validate_text("status", require("status", status))
    in_reply_to_status_id = _optional(validate_tweet_id, "in_reply_to_status_id", in_reply_to_status_id)
    lat = _optional(validate_coordinate, "lat", lat, 90)
    long = _optional(validate_coordinate, "long", long, 180)
    place_id = _optional(validate_text, "place_id", place_id, allow_empty=False)
    trim_user = _optional(validate_bool, "trim_user", trim_user)
    return status, in_reply_to_status_id, lat, long, place_id, trim_user


def build_retweets(id: int, count: Optional[int] = None,
                   trim_user: Optional[bool] = None) -> RequestDescription:
    """
    GET statuses/retweets/:id

    Returns up to 100 of the first retweets of a given tweet.
    """
    path = endpoints.RETWEETS.resolve(id)
    params = ParameterBuilder()
    params.add("count", _optional(validate_int, "count", count, positive=True))
    params.add("trim_user", _optional(validate_bool, "trim_user", trim_user))
    return params.build(endpoints.RETWEETS.method, path)


def build_show(id: Optional[int] = None, count: Optional[int] = None,
               trim_user: Optional[bool] = None, include_my_retweet: Optional[bool] = None,
               include_entities: Optional[bool] = None) -> RequestDescription:
    """
    GET statuses/show

    Returns a single Tweet. The id argument is accepted for signature
    compatibility but is not sent, in the path or as a parameter.
    """
    params = ParameterBuilder()
    params.add("count", _optional(validate_int, "count", count, positive=True))
    params.add("trim_user", _optional(validate_bool, "trim_user", trim_user))
    params.add("include_my_retweet", _optional(validate_bool, "include_my_retweet", include_my_retweet))
    params.add("include_entities", _optional(validate_bool, "include_entities", include_entities))
    return params.build(endpoints.SHOW.method, endpoints.SHOW.resolve())


def build_destroy(id: int, trim_user: Optional[bool] = None) -> RequestDescription:
    """
    POST statuses/destroy/:id

    Destroys the status specified by id. The authenticating user must be its author.
    """
    path = endpoints.DESTROY.resolve(id)
    params = ParameterBuilder()
    params.add("trim_user", _optional(validate_bool, "trim_user", trim_user))
    return params.build(endpoints.DESTROY.method, path)


def build_update(status: str, in_reply_to_status_id: Optional[int] = None,
                 lat: Optional[float] = None, long: Optional[float] = None,
                 place_id: Optional[str] = None,
                 trim_user: Optional[bool] = None) -> RequestDescription:
    """
    POST statuses/update

    Posts a tweet. A place_id takes priority over lat/long; either geo form
    also turns on display_coordinates.

    Args:
        status: Tweet text, always sent
        in_reply_to_status_id: Id of the tweet being replied to
        lat: Latitude, only sent together with long
        long: Longitude, only sent together with lat
        place_id: Place to attach to the tweet
        trim_user: Return only the author id in the response

    Returns:
        RequestDescription for a form-encoded POST
    """
    status, in_reply_to_status_id, lat, long, place_id, trim_user = _validate_update_args(
        status, in_reply_to_status_id, lat, long, place_id, trim_user)

    params = ParameterBuilder()
    params.add("status", status)
    params.add("in_reply_to_status_id", in_reply_to_status_id)
    _add_geo(params, lat, long, place_id)
    params.add("trim_user", trim_user)
    return params.build(endpoints.UPDATE.method, endpoints.UPDATE.resolve())


def build_update_with_media(status: str, media: bytes,
                            in_reply_to_status_id: Optional[int] = None,
                            lat: Optional[float] = None, long: Optional[float] = None,
                            place_id: Optional[str] = None,
                            trim_user: Optional[bool] = None) -> RequestDescription:
    """
    POST statuses/update_with_media

    Same parameters as build_update plus the media bytes, which travel as a
    multipart file under the media[] field.
    """
    status, in_reply_to_status_id, lat, long, place_id, trim_user = _validate_update_args(
        status, in_reply_to_status_id, lat, long, place_id, trim_user)
    media = validate_media("media", media)

    params = ParameterBuilder()
    params.add("status", status)
    params.attach(MEDIA_FIELD, media)
    params.add("in_reply_to_status_id", in_reply_to_status_id)
    _add_geo(params, lat, long, place_id)
    params.add("trim_user", trim_user)
    return params.build(endpoints.UPDATE_WITH_MEDIA.method, endpoints.UPDATE_WITH_MEDIA.resolve())


def build_retweet(id: int, trim_user: Optional[bool] = None) -> RequestDescription:
    """POST statuses/retweet/:id"""
    path = endpoints.RETWEET.resolve(id)
    params = ParameterBuilder()
    params.add("trim_user", _optional(validate_bool, "trim_user", trim_user))
    return params.build(endpoints.RETWEET.method, path)


def build_oembed(id: int, url: str, max_width: Optional[int] = None,
                 hide_media: Optional[bool] = None, hide_thread: Optional[bool] = None,
                 omit_script: Optional[bool] = None, align: Optional[str] = None,
                 related: Optional[str] = None, lang: Optional[str] = None) -> RequestDescription:
    """
    GET statuses/oembed

    Returns information for embedding a Tweet on third party sites.

    Args:
        id: Tweet id, always sent
        url: Tweet URL, always sent
        max_width: Maximum rendering width in pixels
        hide_media: Do not expand images
        hide_thread: Do not show the replied-to tweet
        omit_script: Leave out the widgets.js script element
        align: left, center, right or none
        related: Comma separated screen names
        lang: Language code of the rendered embed

    Returns:
        RequestDescription for a GET
    """
    params = ParameterBuilder()
    params.add("id", validate_tweet_id("id", id))
    params.add("url", validate_url("url", url))
    params.add("max_width", _optional(validate_int, "max_width", max_width, positive=True))
    params.add("hide_media", _optional(validate_bool, "hide_media", hide_media))
    params.add("hide_thread", _optional(validate_bool, "hide_thread", hide_thread))
    params.add(OMIT_SCRIPT_KEY, _optional(validate_bool, "omit_script", omit_script))
    params.add("align", _optional(validate_align, "align", align))
    params.add("related", _optional(validate_text, "related", related, allow_empty=False))
    params.add("lang", _optional(validate_text, "lang", lang, allow_empty=False))
    return params.build(endpoints.OEMBED.method, endpoints.OEMBED.resolve())


def build_retweeters(id: int, cursor: Optional[int] = None,
                     stringify_ids: Optional[bool] = None) -> RequestDescription:
    """
    GET statuses/retweeters/ids

    Returns up to 100 ids of users who retweeted the given tweet.

    Note: requests go to statuses/oembed, and stringify_ids is sent with the
    cursor value rather than the flag. Both match the shipped behaviour and
    are tracked as open questions.
    """
    params = ParameterBuilder()
    params.add("id", validate_tweet_id("id", id))
    cursor = _optional(validate_int, "cursor", cursor)
    params.add("cursor", cursor)
    if stringify_ids is not None:
        validate_bool("stringify_ids", stringify_ids)
        if cursor is None:
            raise MissingRequiredField("cursor")
        params.add("stringify_ids", cursor)
    return params.build(endpoints.RETWEETERS.method, endpoints.RETWEETERS.resolve())


def build_lookup(tweet_ids: Iterable[int], include_entities: Optional[bool] = None,
                 map: Optional[bool] = None) -> RequestDescription:
    """
    GET statuses/lookup

    Hydrates up to 100 tweets given as a list of ids.
    """
    params = ParameterBuilder()
    params.add("id", join_ids(validate_tweet_ids("tweet_ids", tweet_ids)))
    params.add("include_entities", _optional(validate_bool, "include_entities", include_entities))
    params.add("map", _optional(validate_bool, "map", map))
    return params.build(endpoints.LOOKUP.method, endpoints.LOOKUP.resolve())
