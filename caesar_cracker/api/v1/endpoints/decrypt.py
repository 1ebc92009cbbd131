from fastapi import APIRouter, HTTPException, status

from caesar_cracker.core.exceptions import CiphertextTooLongError, ValidationError
from caesar_cracker.dependencies import SettingsDep
from caesar_cracker.models.schemas import DecryptRequest, DecryptResponse, ErrorResponse
from caesar_cracker.services.cipher.transform import decode, ensure_ascii, normalize_key

router = APIRouter()


@router.post(
    "",
    response_model=DecryptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
    },
    summary="Decrypt ciphertext",
    description="Undo the shift applied by /encrypt with the same key.",
)
async def decrypt_ciphertext(
    request: DecryptRequest,
    settings: SettingsDep,
) -> DecryptResponse:
    """Decrypt ciphertext that was encrypted with the given key."""
    try:
        if len(request.ciphertext) > settings.max_ciphertext_length:
            raise CiphertextTooLongError(
                len(request.ciphertext), settings.max_ciphertext_length
            )
        ensure_ascii(request.ciphertext)
        key = normalize_key(request.key)
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )

    return DecryptResponse(
        plaintext=decode(request.ciphertext, key),
        key_used=key,
    )
