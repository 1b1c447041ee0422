from fastapi import APIRouter, Depends, status

from flightlog.application.dto.sync_dto import LoginAckDTO, LoginEventDTO
from flightlog.application.use_cases.access_use_cases import AccessUseCases
from flightlog.api.v1.dependencies.use_case_deps import get_access_use_cases

router = APIRouter(prefix="/logins", tags=["Logins"])


@router.post("", response_model=LoginAckDTO, status_code=status.HTTP_202_ACCEPTED)
async def register_login(
    event: LoginEventDTO,
    use_cases: AccessUseCases = Depends(get_access_use_cases),
):
    """
    Anotar un inicio de sesion en la hoja central (sin esperar respuesta).
    """
    return LoginAckDTO(queued=await use_cases.register_login(event))
