"""User API routes."""

from fastapi import APIRouter, Depends, HTTPException, Response, status
from fastapi.responses import JSONResponse
from users_api.models.error import ErrorMessage
from users_api.services import get_user_service
from users_common.models.results import NotFound, ValidationFailed
from users_common.models.user import User, UserInput
from users_common.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"], redirect_slashes=False)

USER_NOT_FOUND = "User not found."

_not_found = {status.HTTP_404_NOT_FOUND: {"description": USER_NOT_FOUND}}
_bad_request = {status.HTTP_400_BAD_REQUEST: {"model": ErrorMessage}}


def _validation_error(outcome: ValidationFailed) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": outcome.reason})


@router.get("", response_model=list[User])
async def list_users(service: UserService = Depends(get_user_service)) -> list[User]:
    return service.list_all()


@router.get("/{user_id}", response_model=User, responses=_not_found)
async def get_user(user_id: int, service: UserService = Depends(get_user_service)) -> User:
    outcome = service.get_by_id(user_id)
    if isinstance(outcome, NotFound):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)
    return outcome.value


@router.post("", response_model=User, status_code=status.HTTP_201_CREATED, responses=_bad_request)
async def create_user(
    user: UserInput,
    response: Response,
    service: UserService = Depends(get_user_service),
) -> User | JSONResponse:
    """Create a user. Any ``id`` in the body is ignored."""
    outcome = service.create(user)
    if isinstance(outcome, ValidationFailed):
        return _validation_error(outcome)

    response.headers["Location"] = f"/users/{outcome.value.id}"
    return outcome.value


@router.put("/{user_id}", response_model=User, responses={**_not_found, **_bad_request})
async def update_user(
    user_id: int,
    user: UserInput,
    service: UserService = Depends(get_user_service),
) -> User | JSONResponse:
    """Replace the name and email of a user."""
    outcome = service.update(user_id, user)
    if isinstance(outcome, NotFound):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)
    if isinstance(outcome, ValidationFailed):
        return _validation_error(outcome)
    return outcome.value


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, responses=_not_found)
async def delete_user(user_id: int, service: UserService = Depends(get_user_service)) -> Response:
    outcome = service.delete(user_id)
    if isinstance(outcome, NotFound):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
