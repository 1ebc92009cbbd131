from fastapi import APIRouter

from caesar_cracker.api.v1.endpoints import crack, decrypt, encrypt

api_router = APIRouter()

api_router.include_router(
    crack.router,
    prefix="/crack",
    tags=["Key Recovery"],
)

api_router.include_router(
    decrypt.router,
    prefix="/decrypt",
    tags=["Decryption"],
)

api_router.include_router(
    encrypt.router,
    prefix="/encrypt",
    tags=["Encryption"],
)
