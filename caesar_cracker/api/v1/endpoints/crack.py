from typing import Any

from fastapi import APIRouter, HTTPException, status

from caesar_cracker.core.exceptions import (
    CiphertextTooLongError,
    CrackerError,
    EngineNotFoundError,
    ValidationError,
)
from caesar_cracker.dependencies import OrchestratorDep, SettingsDep
from caesar_cracker.models.schemas import CrackRequest, CrackResponse, ErrorResponse
from caesar_cracker.services.cipher.transform import ensure_ascii
from caesar_cracker.services.engines.registry import EngineRegistry

router = APIRouter()


@router.post(
    "",
    response_model=CrackResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        404: {"model": ErrorResponse, "description": "Attack not supported"},
        500: {"model": ErrorResponse, "description": "Attack failed"},
    },
    summary="Recover the shift key",
    description=(
        "Run a dictionary or frequency attack over all 128 shifts and return "
        "the most probable key(s) with the plaintext each one produces."
    ),
)
async def crack_ciphertext(
    request: CrackRequest,
    settings: SettingsDep,
    orchestrator: OrchestratorDep,
) -> CrackResponse:
    """
    Recover the shift key of ASCII ciphertext.

    An empty key list means no viable key was found. The returned keys are
    decode keys: shifting the ciphertext by a key yields the plaintext.
    """
    try:
        if len(request.ciphertext) > settings.max_ciphertext_length:
            raise CiphertextTooLongError(
                len(request.ciphertext), settings.max_ciphertext_length
            )
        ensure_ascii(request.ciphertext)

        result = orchestrator.crack(
            request.ciphertext,
            request.attack,
            request.wordlist,
        )

    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )
    except EngineNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message,
        )
    except CrackerError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Attack failed: {e.message}",
        )

    return CrackResponse(
        attack=result.attack,
        keys=result.keys,
        scores=result.scores,
        candidates=result.candidates,
        explanation=result.explanation,
    )


@router.get(
    "/attacks",
    summary="List attacks",
    description="List the registered key-recovery attacks.",
)
async def list_attacks() -> list[dict[str, Any]]:
    """List every registered attack engine."""
    registry = EngineRegistry()
    return [engine.describe() for engine in registry.get_all_engines()]
