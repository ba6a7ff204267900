"""
Twitter API Client
Main client for the statuses endpoints of the Twitter REST API.
"""
from typing import Iterable, Optional

from . import statuses
from .auth import Auth
from .transport import FailureHandler, HTTPTransport, SuccessHandler


class TwitterClient:
    """Twitter API client for the statuses endpoints.

    Each method builds a request, which raises InvalidArgument on bad input
    before anything is sent, and hands it to the transport together with the
    success and failure continuations.
    """

    def __init__(self, auth: Optional[Auth] = None, transport=None):
        """
        Initialize Twitter API client.

        Args:
            auth: OAuth 1.0a credentials used when no transport is given
            transport: HTTPTransport, AsyncHTTPTransport or any object with a
                compatible send(request, success, failure)
        """
        self.auth = auth
        self.transport = transport or HTTPTransport(auth=auth)

    def _send(self, request, success, failure):
        return self.transport.send(request, success, failure)

    def get_statuses_retweets(self, id: int, count: Optional[int] = None,
                              trim_user: Optional[bool] = None,
                              success: Optional[SuccessHandler] = None,
                              failure: Optional[FailureHandler] = None):
        """
        Get up to 100 of the first retweets of a tweet.

        Args:
            id: Tweet ID
            count: Number of retweets to return
            trim_user: Return only user ids

        Returns:
            Whatever the transport's send returns
        """
        request = statuses.build_retweets(id, count=count, trim_user=trim_user)
        return self._send(request, success, failure)

    def get_statuses_show(self, id: Optional[int] = None, count: Optional[int] = None,
                          trim_user: Optional[bool] = None,
                          include_my_retweet: Optional[bool] = None,
                          include_entities: Optional[bool] = None,
                          success: Optional[SuccessHandler] = None,
                          failure: Optional[FailureHandler] = None):
        """Get a single tweet."""
        request = statuses.build_show(id, count=count, trim_user=trim_user,
                                      include_my_retweet=include_my_retweet,
                                      include_entities=include_entities)
        return self._send(request, success, failure)

    def post_statuses_destroy(self, id: int, trim_user: Optional[bool] = None,
                              success: Optional[SuccessHandler] = None,
                              failure: Optional[FailureHandler] = None):
        """Delete one of the authenticated user's tweets."""
        request = statuses.build_destroy(id, trim_user=trim_user)
        return self._send(request, success, failure)

    def post_status_update(self, status: str, in_reply_to_status_id: Optional[int] = None,
                           lat: Optional[float] = None, long: Optional[float] = None,
                           place_id: Optional[str] = None, trim_user: Optional[bool] = None,
                           success: Optional[SuccessHandler] = None,
                           failure: Optional[FailureHandler] = None):
        """
        Post a tweet.

        Args:
            status: Tweet text
            in_reply_to_status_id: Tweet being replied to
            lat: Latitude, used only with long and without place_id
            long: Longitude, used only with lat and without place_id
            place_id: Place to attach
            trim_user: Return only the author id

        Returns:
            Whatever the transport's send returns
        """
        request = statuses.build_update(status, in_reply_to_status_id=in_reply_to_status_id,
                                        lat=lat, long=long, place_id=place_id,
                                        trim_user=trim_user)
        return self._send(request, success, failure)

    def post_status_update_with_media(self, status: str, media: bytes,
                                      in_reply_to_status_id: Optional[int] = None,
                                      lat: Optional[float] = None, long: Optional[float] = None,
                                      place_id: Optional[str] = None,
                                      trim_user: Optional[bool] = None,
                                      success: Optional[SuccessHandler] = None,
                                      failure: Optional[FailureHandler] = None):
        """Post a tweet with an attached image."""
        request = statuses.build_update_with_media(
            status, media, in_reply_to_status_id=in_reply_to_status_id,
            lat=lat, long=long, place_id=place_id, trim_user=trim_user)
        return self._send(request, success, failure)

    def post_status_retweet(self, id: int, trim_user: Optional[bool] = None,
                            success: Optional[SuccessHandler] = None,
                            failure: Optional[FailureHandler] = None):
        """Retweet a tweet."""
        request = statuses.build_retweet(id, trim_user=trim_user)
        return self._send(request, success, failure)

    def get_statuses_oembed(self, id: int, url: str, max_width: Optional[int] = None,
                            hide_media: Optional[bool] = None,
                            hide_thread: Optional[bool] = None,
                            omit_script: Optional[bool] = None, align: Optional[str] = None,
                            related: Optional[str] = None, lang: Optional[str] = None,
                            success: Optional[SuccessHandler] = None,
                            failure: Optional[FailureHandler] = None):
        """Get embed markup for a tweet."""
        request = statuses.build_oembed(id, url, max_width=max_width, hide_media=hide_media,
                                        hide_thread=hide_thread, omit_script=omit_script,
                                        align=align, related=related, lang=lang)
        return self._send(request, success, failure)

    def get_statuses_retweeters(self, id: int, cursor: Optional[int] = None,
                                stringify_ids: Optional[bool] = None,
                                success: Optional[SuccessHandler] = None,
                                failure: Optional[FailureHandler] = None):
        """Get ids of users who retweeted a tweet."""
        request = statuses.build_retweeters(id, cursor=cursor, stringify_ids=stringify_ids)
        return self._send(request, success, failure)

    def get_statuses_lookup(self, tweet_ids: Iterable[int],
                            include_entities: Optional[bool] = None,
                            map: Optional[bool] = None,
                            success: Optional[SuccessHandler] = None,
                            failure: Optional[FailureHandler] = None):
        """Hydrate up to 100 tweets by id."""
        request = statuses.build_lookup(tweet_ids, include_entities=include_entities, map=map)
        return self._send(request, success, failure)
