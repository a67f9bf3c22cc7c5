import logging
from dataclasses import asdict
from typing import TypeVar

from fastapi import APIRouter, HTTPException, status

from app.core.exceptions import TextTooLongError
from app.dependencies import RegistryDep, SettingsDep
from app.models.schemas import ErrorResponse, PlaygroundCard, PlaygroundRequest, PlaygroundResponse
from app.services.playground import PlaygroundKeys, PlaygroundRunner

logger = logging.getLogger(__name__)

T = TypeVar("T")

router = APIRouter()


@router.post(
    "",
    response_model=PlaygroundResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
    },
    summary="Run all ciphers",
    description=(
        "Encrypt and decrypt one source text with every cipher at once. "
        "Unset fields fall back to the configured playground defaults."
    ),
)
async def run_playground(
    request: PlaygroundRequest,
    settings: SettingsDep,
    registry: RegistryDep,
) -> PlaygroundResponse:
    """
    Render the cipher playground.

    Caesar and Vigenère show the source decrypted with the inverse shift;
    XOR and Scytale show their own ciphertext decrypted again.
    """
    source = request.source if request.source is not None else settings.playground_source

    if len(source) > settings.max_text_length:
        error = TextTooLongError(len(source), settings.max_text_length)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=error.message,
        )

    keys = PlaygroundKeys(
        caesar_shift=_pick(request.caesar_shift, settings.playground_caesar_shift),
        vigenere_key=_pick(request.vigenere_key, settings.playground_vigenere_key),
        xor_key=_pick(request.xor_key, settings.playground_xor_key),
        scytale_rows=_pick(request.scytale_rows, settings.playground_scytale_rows),
    )

    result = PlaygroundRunner(registry).run(source, keys)
    logger.debug("Playground rendered %d cards for %d chars", len(result.cards), len(source))

    return PlaygroundResponse(
        source=result.source,
        cards=[PlaygroundCard(**asdict(card)) for card in result.cards],
    )


def _pick(value: T | None, default: T) -> T:
    """Use the request value unless it was left unset."""
    return default if value is None else value
