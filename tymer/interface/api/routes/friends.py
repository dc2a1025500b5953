"""Friendship routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel

from tymer.application.usecase.friendship import (
    AcceptFriendRequestRequest,
    AcceptFriendRequestResponse,
    AcceptFriendRequestUseCase,
    ListFriendRequestsRequest,
    ListFriendRequestsResponse,
    ListFriendRequestsUseCase,
    ListFriendsRequest,
    ListFriendsResponse,
    ListFriendsUseCase,
    RemoveFriendRequest,
    RemoveFriendResponse,
    RemoveFriendUseCase,
    SendFriendRequestRequest,
    SendFriendRequestResponse,
    SendFriendRequestUseCase,
)
from tymer.domain.service import JWTService
from tymer.interface.api.session import session_user_id

router = APIRouter(prefix="/friends", tags=["friends"], route_class=DishkaRoute)


class SendFriendRequestAPIRequest(BaseModel):
    """API request for sending a friend request."""

    friend_id: str


@router.get("", response_model=ListFriendsResponse)
async def list_friends(
    use_case: FromDishka[ListFriendsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListFriendsResponse:
    """List accepted friends."""
    return await use_case.execute(
        ListFriendsRequest(user_id=session_user_id(jwt_service, auth_token))
    )


@router.get("/requests", response_model=ListFriendRequestsResponse)
async def list_friend_requests(
    use_case: FromDishka[ListFriendRequestsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListFriendRequestsResponse:
    """List pending requests addressed to the user."""
    return await use_case.execute(
        ListFriendRequestsRequest(user_id=session_user_id(jwt_service, auth_token))
    )


@router.post(
    "/requests",
    response_model=SendFriendRequestResponse,
    status_code=status.HTTP_201_CREATED,
)
async def send_friend_request(
    request: SendFriendRequestAPIRequest,
    use_case: FromDishka[SendFriendRequestUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> SendFriendRequestResponse:
    """Ask another user to become friends."""
    return await use_case.execute(
        SendFriendRequestRequest(
            friend_id=request.friend_id,
            user_id=session_user_id(jwt_service, auth_token),
        )
    )


@router.post("/requests/{friendship_id}/accept", response_model=AcceptFriendRequestResponse)
async def accept_friend_request(
    friendship_id: str,
    use_case: FromDishka[AcceptFriendRequestUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AcceptFriendRequestResponse:
    """Accept a pending request. Only the addressee may accept."""
    return await use_case.execute(
        AcceptFriendRequestRequest(
            friendship_id=friendship_id,
            user_id=session_user_id(jwt_service, auth_token),
        )
    )


@router.delete("/{friendship_id}", response_model=RemoveFriendResponse)
async def remove_friend(
    friendship_id: str,
    use_case: FromDishka[RemoveFriendUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> RemoveFriendResponse:
    """Remove a friend or withdraw a request."""
    return await use_case.execute(
        RemoveFriendRequest(
            friendship_id=friendship_id,
            user_id=session_user_id(jwt_service, auth_token),
        )
    )
