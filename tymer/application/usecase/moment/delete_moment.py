"""Delete moment use case."""

from pydantic import BaseModel

from tymer.application.usecase.base import parse_id, require_user
from tymer.domain.service import MomentService
from tymer.domain.value import MomentId


class DeleteMomentRequest(BaseModel):
    """Delete moment request."""

    moment_id: str
    user_id: str | None  # From the session


class DeleteMomentResponse(BaseModel):
    """Delete moment response."""

    moment_id: str
    deleted: bool = True


class DeleteMomentUseCase:
    """Use case for the author deleting one of their moments."""

    def __init__(self, moment_service: MomentService) -> None:
        """Initialize delete moment use case.

        Args:
            moment_service: Moment domain service
        """
        self.moment_service = moment_service

    async def execute(self, request: DeleteMomentRequest) -> DeleteMomentResponse:
        user_id = require_user(request.user_id)
        moment_id = MomentId(parse_id(request.moment_id, "moment"))

        await self.moment_service.delete_moment(moment_id, user_id)
        return DeleteMomentResponse(moment_id=str(moment_id))
