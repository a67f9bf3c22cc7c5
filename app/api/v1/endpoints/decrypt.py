import logging

from fastapi import APIRouter, HTTPException, status

from app.core.exceptions import EngineNotFoundError, TextTooLongError, ValidationError
from app.dependencies import RegistryDep, SettingsDep
from app.models.schemas import DecryptRequest, DecryptResponse, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=DecryptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        404: {"model": ErrorResponse, "description": "Cipher type not supported"},
        500: {"model": ErrorResponse, "description": "Decryption failed"},
    },
    summary="Decrypt ciphertext",
    description="Decrypt ciphertext using a specified cipher type and key.",
)
async def decrypt_ciphertext(
    request: DecryptRequest,
    settings: SettingsDep,
    registry: RegistryDep,
) -> DecryptResponse:
    """Decrypt ciphertext with a known key and explain the steps."""
    try:
        # Validate ciphertext length
        if len(request.ciphertext) > settings.max_text_length:
            raise TextTooLongError(len(request.ciphertext), settings.max_text_length)

        engine = registry.require_engine(request.cipher_type)
        result = engine.decrypt_with_key(request.ciphertext, request.key)
        logger.debug("Decrypted %d chars with %s", len(request.ciphertext), engine.name)

        return DecryptResponse(
            plaintext=result.plaintext,
            cipher_type=request.cipher_type,
            key_used=result.key,
            explanation=result.explanation,
        )

    except EngineNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message,
        )
    except ValidationError as e:
        logger.warning("Rejected %s decryption: %s", request.cipher_type.value, e.message)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )
    except Exception as e:
        logger.exception("Decryption failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Decryption failed: {str(e)}",
        )
