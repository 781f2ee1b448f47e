"""Profiles API endpoints, including the selected-profile switcher."""

from fastapi import APIRouter, Depends, Request, Response
from fastapi import status as http_status

from study_tracker.schemas.profile import (
    ProfileCreate,
    ProfileResponse,
    ProfileSelect,
    SelectedProfileResponse,
)
from study_tracker.services.profile_service import ProfileService
from study_tracker.utils.dependencies import dependencies
from study_tracker.utils.profile_selection import ProfileSelection

router = APIRouter(
    prefix="/profiles",
    tags=["Profiles"],
)


@router.get("")
async def list_profiles(
    service: ProfileService = Depends(dependencies.profile),
) -> list[ProfileResponse]:
    """List all profiles ordered by name."""
    profiles = await service.list_ordered()
    return [ProfileResponse.model_validate(p) for p in profiles]


@router.post("", status_code=http_status.HTTP_201_CREATED)
async def create_profile(
    data: ProfileCreate,
    service: ProfileService = Depends(dependencies.profile),
) -> ProfileResponse:
    """Create a new profile.

    Raises:
        DuplicateRecordError: If a profile with the same name exists.
    """
    profile = await service.create(name=data.name.strip())
    return ProfileResponse.model_validate(profile)


@router.get("/selected")
async def get_selected_profile(
    request: Request,
    service: ProfileService = Depends(dependencies.profile),
) -> SelectedProfileResponse:
    """Resolve the selected profile from the cookie.

    Falls back to the first profile when nothing (or a deleted profile)
    is stored.
    """
    profiles = await service.list_ordered()
    selected = ProfileSelection.resolve(profiles, ProfileSelection.stored_id(request))
    return SelectedProfileResponse(
        selected=ProfileResponse.model_validate(selected) if selected else None,
        profiles=[ProfileResponse.model_validate(p) for p in profiles],
    )


@router.put("/selected")
async def select_profile(
    data: ProfileSelect,
    response: Response,
    service: ProfileService = Depends(dependencies.profile),
) -> SelectedProfileResponse:
    """Switch the selected profile and remember it in a cookie.

    Raises:
        RecordNotFoundError: If the profile does not exist.
    """
    profile = await service.get_by_id_or_fail(data.profile_id)
    ProfileSelection.select(response, profile)
    profiles = await service.list_ordered()
    return SelectedProfileResponse(
        selected=ProfileResponse.model_validate(profile),
        profiles=[ProfileResponse.model_validate(p) for p in profiles],
    )
