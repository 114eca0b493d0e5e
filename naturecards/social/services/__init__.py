from .friendship import (
    check_friendship_status as _check_friendship_status,
    derive_friend_list as _derive_friend_list,
    derive_friend_request_list as _derive_friend_request_list,
    gallery_url as _gallery_url,
    get_friendship_status as _get_friendship_status,
)
from .overview import get_social_page_data as _get_social_page_data
from .requests import (
    accept_friend_request as _accept_friend_request,
    cancel_friend_request as _cancel_friend_request,
    decline_friend_request as _decline_friend_request,
    send_friend_request as _send_friend_request,
)
from .trading import (
    accept_trade_request as _accept_trade_request,
    decline_trade_request as _decline_trade_request,
    derive_trade_request_list as _derive_trade_request_list,
    send_trade_request as _send_trade_request,
)


class SocialService:
    """Service class for friend and trade reconciliation."""

    gallery_url = staticmethod(_gallery_url)
    derive_friend_list = staticmethod(_derive_friend_list)
    derive_friend_request_list = staticmethod(_derive_friend_request_list)
    derive_trade_request_list = staticmethod(_derive_trade_request_list)
    check_friendship_status = staticmethod(_check_friendship_status)
    get_friendship_status = staticmethod(_get_friendship_status)
    accept_friend_request = staticmethod(_accept_friend_request)
    decline_friend_request = staticmethod(_decline_friend_request)
    cancel_friend_request = staticmethod(_cancel_friend_request)
    send_friend_request = staticmethod(_send_friend_request)
    accept_trade_request = staticmethod(_accept_trade_request)
    decline_trade_request = staticmethod(_decline_trade_request)
    send_trade_request = staticmethod(_send_trade_request)
    get_social_page_data = staticmethod(_get_social_page_data)


__all__ = ["SocialService"]
