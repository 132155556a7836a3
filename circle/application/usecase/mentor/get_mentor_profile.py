"""Get mentor profile use case."""

from pydantic import BaseModel

from circle.application.usecase.base import BaseUseCase
from circle.domain.service import MentorService
from circle.domain.value import MentorProfileId

from .search_mentors import MentorItem


class GetMentorProfileRequest(BaseModel):
    """Get mentor profile request."""

    profile_id: str


class GetMentorProfileResponse(BaseModel):
    """Get mentor profile response."""

    mentor: MentorItem


class GetMentorProfileUseCase(
    BaseUseCase[GetMentorProfileRequest, GetMentorProfileResponse]
):
    """Use case for showing one mentor profile."""

    def __init__(self, mentor_service: MentorService) -> None:
        """Initialize get mentor profile use case.

        Args:
            mentor_service: Mentor domain service
        """
        self.mentor_service = mentor_service

    async def execute(
        self, request: GetMentorProfileRequest
    ) -> GetMentorProfileResponse:
        """Execute get mentor profile flow.

        Raises:
            NotFoundError: If no profile has this ID
        """
        profile = await self.mentor_service.get_profile(
            MentorProfileId(request.profile_id)
        )
        return GetMentorProfileResponse(mentor=MentorItem.from_domain(profile))
