"""Friendship use cases."""

from .list_friends import (
    GetFriendRequestsRequest,
    GetFriendRequestsResponse,
    GetFriendRequestsUseCase,
    GetFriendsRequest,
    GetFriendsResponse,
    GetFriendsUseCase,
    PendingRequestInfo,
)
from .remove_friend import RemoveFriendRequest, RemoveFriendResponse, RemoveFriendUseCase
from .respond_request import (
    AcceptFriendRequestUseCase,
    RejectFriendRequestUseCase,
    RespondFriendRequestRequest,
)
from .search_users import SearchUsersRequest, SearchUsersResponse, SearchUsersUseCase
from .send_request import (
    FriendRequestResponse,
    SendFriendRequestRequest,
    SendFriendRequestUseCase,
)

__all__ = [
    "AcceptFriendRequestUseCase",
    "FriendRequestResponse",
    "GetFriendRequestsRequest",
    "GetFriendRequestsResponse",
    "GetFriendRequestsUseCase",
    "GetFriendsRequest",
    "GetFriendsResponse",
    "GetFriendsUseCase",
    "PendingRequestInfo",
    "RejectFriendRequestUseCase",
    "RemoveFriendRequest",
    "RemoveFriendResponse",
    "RemoveFriendUseCase",
    "RespondFriendRequestRequest",
    "SearchUsersRequest",
    "SearchUsersResponse",
    "SearchUsersUseCase",
    "SendFriendRequestRequest",
    "SendFriendRequestUseCase",
]
