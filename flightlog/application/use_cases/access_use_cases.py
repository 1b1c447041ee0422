"""
Registro de accesos en la pestaña Logins de la hoja central.
"""
from typing import Optional

from loguru import logger

from flightlog.application.dto.sync_dto import LoginEventDTO
from flightlog.infrastructure.external.sheets_sync.sheets_publisher import SheetsPublisher
from flightlog.shared.utils.background import fire_and_forget


class AccessUseCases:

    def __init__(self, publisher: Optional[SheetsPublisher] = None):
        self.publisher = publisher

    async def register_login(self, event: LoginEventDTO) -> bool:
        """
        Encola el envio del login. Retorna False si no hay hoja configurada.
        """
        if self.publisher is None or not self.publisher.endpoint:
            logger.debug(f"Login de {event.username} no enviado: hoja central no configurada")
            return False

        fire_and_forget(
            self.publisher.send_login(
                event.username,
                event.name,
                event.role,
                timestamp=event.timestamp,
            ),
            label=f"login {event.username}",
        )
        return True
