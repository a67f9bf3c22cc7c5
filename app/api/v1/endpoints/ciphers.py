from fastapi import APIRouter

from app.dependencies import RegistryDep
from app.models.schemas import CipherInfo, CipherListResponse

router = APIRouter()


@router.get(
    "",
    response_model=CipherListResponse,
    summary="List ciphers",
    description="List the available cipher engines with their key type and default key.",
)
async def list_ciphers(registry: RegistryDep) -> CipherListResponse:
    """List every registered cipher engine."""
    return CipherListResponse(
        ciphers=[
            CipherInfo(
                cipher_type=engine.cipher_type,
                cipher_family=engine.cipher_family,
                name=engine.name,
                description=engine.description,
                key_kind=engine.key_kind,
                default_key=engine.default_key,
            )
            for engine in registry.get_all_engines()
        ]
    )
