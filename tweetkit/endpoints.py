"""
Endpoint descriptors for the statuses family of the REST API.
"""
from dataclasses import dataclass
from typing import Optional

from .utils import validate_tweet_id

ID_PLACEHOLDER = ":id"


@dataclass(frozen=True)
class EndpointSpec:
    """HTTP method and path template of one REST endpoint."""

    method: str
    path_template: str
    requires_path_substitution: bool = False

    def resolve(self, id: Optional[int] = None) -> str:
        """
        Build the request path.

        Args:
            id: Tweet id substituted for the :id placeholder

        Returns:
            Path relative to the API base URL
        """
        if not self.requires_path_substitution:
            return self.path_template
        tweet_id = validate_tweet_id("id", id)
        return self.path_template.replace(ID_PLACEHOLDER, str(tweet_id))


RETWEETS = EndpointSpec("GET", "statuses/retweets/:id.json", True)
# The tweet id is never sent for this endpoint, see build_show.
SHOW = EndpointSpec("GET", "statuses/show.json")
DESTROY = EndpointSpec("POST", "statuses/destroy/:id.json", True)
UPDATE = EndpointSpec("POST", "statuses/update.json")
UPDATE_WITH_MEDIA = EndpointSpec("POST", "statuses/update_with_media.json")
RETWEET = EndpointSpec("POST", "statuses/retweet/:id.json", True)
OEMBED = EndpointSpec("GET", "statuses/oembed")
# Points at oembed rather than statuses/retweeters/ids.json, kept as shipped.
RETWEETERS = EndpointSpec("GET", "statuses/oembed")
LOOKUP = EndpointSpec("GET", "statuses/lookup.json")
