"""
Destino Telegram: envía el artefacto como documento a un canal mediante un bot
"""
import requests
from .base_destination import StorageDestination
from ..exceptions import (
    DestinationAuthError,
    DestinationNotFoundError,
    DestinationTransportError,
)
from ..models import Artifact, BackupConfiguration, StorageKind


class TelegramDestination(StorageDestination):
    """Envía documentos a través de la Bot API de Telegram"""

    kind = StorageKind.TELEGRAM
    API_URL = "https://api.telegram.org/bot{token}/{method}"

    def __init__(self, bot_token: str, channel_id: int):
        super().__init__()
        self.bot_token = bot_token
        self.channel_id = channel_id

    @classmethod
    def from_config(cls, config: BackupConfiguration) -> 'TelegramDestination':
        return cls(config.bot_token, config.channel_id)

    def upload(self, artifact: Artifact) -> str:
        # Valida el token antes de abrir el archivo
        bot = self._call("getMe")
        self.logger.debug(f"Autenticado como @{bot.get('username')}")

        try:
            f = open(artifact.path, 'rb')
        except OSError as e:
            raise DestinationTransportError(f"No se pudo leer {artifact.name}: {e}")

        with f:
            message = self._call(
                "sendDocument",
                data={"chat_id": str(self.channel_id)},
                files={"document": (artifact.name, f)}
            )

        return f"telegram:{self.channel_id}/{message.get('message_id')}"

    def _call(self, method: str, **kwargs) -> dict:
        """
        Invoca un método de la Bot API y traduce los errores

        Args:
            method: Nombre del método (getMe, sendDocument, ...)
            **kwargs: Argumentos para requests.post

        Returns:
            Campo 'result' de la respuesta
        """
        url = self.API_URL.format(token=self.bot_token, method=method)
        try:
            response = requests.post(url, **kwargs)
        except requests.RequestException as e:
            # El token forma parte de la URL, no se incluye en el mensaje
            raise DestinationTransportError(
                f"No se pudo contactar a Telegram ({method}): {e.__class__.__name__}"
            )

        try:
            payload = response.json()
        except ValueError:
            payload = {}

        description = payload.get("description") or response.reason or ""

        if response.status_code == 401:
            raise DestinationAuthError(f"Token de bot inválido: {description}")
        # Un token mal formado no corresponde a ningún bot: la API responde 404
        if method == "getMe" and response.status_code == 404:
            raise DestinationAuthError(f"Token de bot inválido: {description}")
        if "chat not found" in description.lower():
            raise DestinationNotFoundError(f"Canal {self.channel_id} no encontrado: {description}")
        if not response.ok or not payload.get("ok"):
            raise DestinationTransportError(
                f"Telegram rechazó {method} ({response.status_code}): {description}"
            )

        return payload.get("result") or {}
