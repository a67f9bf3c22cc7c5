import logging

from fastapi import APIRouter, HTTPException, status

from app.core.exceptions import EngineNotFoundError, TextTooLongError, ValidationError
from app.dependencies import RegistryDep, SettingsDep
from app.models.schemas import EncryptRequest, EncryptResponse, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=EncryptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        404: {"model": ErrorResponse, "description": "Cipher type not supported"},
        500: {"model": ErrorResponse, "description": "Encryption failed"},
    },
    summary="Encrypt plaintext",
    description="Encrypt plaintext using a specified cipher type and optional key.",
)
async def encrypt_plaintext(
    request: EncryptRequest,
    settings: SettingsDep,
    registry: RegistryDep,
) -> EncryptResponse:
    """
    Encrypt plaintext with a specified cipher type.

    A random key is generated when none is supplied, so a class can be
    handed fresh ciphertexts to work on.
    """
    try:
        # Validate plaintext length
        if len(request.plaintext) > settings.max_text_length:
            raise TextTooLongError(len(request.plaintext), settings.max_text_length)

        engine = registry.require_engine(request.cipher_type)

        # Generate key if not provided
        key = request.key
        if key is None:
            key = engine.generate_random_key()

        key_used = engine.parse_key(key)
        ciphertext = engine.encrypt(request.plaintext, key_used)
        logger.debug("Encrypted %d chars with %s", len(request.plaintext), engine.name)

        return EncryptResponse(
            ciphertext=ciphertext,
            cipher_type=request.cipher_type,
            key_used=key_used,
        )

    except EngineNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message,
        )
    except ValidationError as e:
        logger.warning("Rejected %s encryption: %s", request.cipher_type.value, e.message)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )
    except Exception as e:
        logger.exception("Encryption failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Encryption failed: {str(e)}",
        )
