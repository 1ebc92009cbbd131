from fastapi import APIRouter, HTTPException, status

from caesar_cracker.core.exceptions import CiphertextTooLongError, ValidationError
from caesar_cracker.dependencies import SettingsDep
from caesar_cracker.models.schemas import EncryptRequest, EncryptResponse, ErrorResponse
from caesar_cracker.services.cipher.transform import encode, ensure_ascii, normalize_key

router = APIRouter()


@router.post(
    "",
    response_model=EncryptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
    },
    summary="Encrypt plaintext",
    description="Shift every character of ASCII plaintext by the key, modulo 128.",
)
async def encrypt_plaintext(
    request: EncryptRequest,
    settings: SettingsDep,
) -> EncryptResponse:
    """
    Encrypt plaintext with the shift cipher.

    Keys outside [0, 128) are reduced modulo 128, so -1 and 127 are the same key.
    """
    try:
        if len(request.plaintext) > settings.max_ciphertext_length:
            raise CiphertextTooLongError(
                len(request.plaintext), settings.max_ciphertext_length
            )
        ensure_ascii(request.plaintext)
        key = normalize_key(request.key)
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )

    return EncryptResponse(
        ciphertext=encode(request.plaintext, key),
        key_used=key,
    )
