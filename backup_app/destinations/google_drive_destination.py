"""
Destino Google Drive: sube el artefacto con una cuenta de servicio
"""
from google.auth.exceptions import GoogleAuthError
from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError
from googleapiclient.http import MediaFileUpload
from .base_destination import StorageDestination
from ..exceptions import (
    DestinationAuthError,
    DestinationNotFoundError,
    DestinationTransportError,
)
from ..models import Artifact, BackupConfiguration, StorageKind


class GoogleDriveDestination(StorageDestination):
    """Crea el archivo dentro de una carpeta de Drive"""

    kind = StorageKind.GOOGLE_DRIVE
    SCOPES = ['https://www.googleapis.com/auth/drive']

    def __init__(self, credentials_file: str, folder_id: str):
        super().__init__()
        self.credentials_file = credentials_file
        self.folder_id = folder_id

    @classmethod
    def from_config(cls, config: BackupConfiguration) -> 'GoogleDriveDestination':
        return cls(config.google_creds, config.google_folder_id)

    def _service(self):
        """
        Carga el JSON de la cuenta de servicio y construye el cliente de Drive

        Raises:
            DestinationAuthError: Si el archivo no se puede leer o interpretar
        """
        try:
            credentials = service_account.Credentials.from_service_account_file(
                self.credentials_file, scopes=self.SCOPES
            )
        except (OSError, ValueError) as e:
            raise DestinationAuthError(
                f"No se pudieron leer las credenciales {self.credentials_file}: {e}"
            )
        return build('drive', 'v3', credentials=credentials, cache_discovery=False)

    def upload(self, artifact: Artifact) -> str:
        service = self._service()
        metadata = {'name': artifact.name, 'parents': [self.folder_id]}
        try:
            media = MediaFileUpload(str(artifact.path), resumable=True)
        except OSError as e:
            raise DestinationTransportError(f"No se pudo abrir {artifact.name}: {e}")

        try:
            created = service.files().create(
                body=metadata,
                media_body=media,
                fields='id'
            ).execute()
        except HttpError as e:
            status = e.resp.status
            if status in (401, 403):
                raise DestinationAuthError(f"Drive rechazó las credenciales: {e}")
            if status == 404:
                raise DestinationNotFoundError(f"La carpeta {self.folder_id} no existe: {e}")
            raise DestinationTransportError(f"Error subiendo a Google Drive: {e}")
        except GoogleAuthError as e:
            raise DestinationAuthError(f"Error de autenticación con Google: {e}")
        except OSError as e:
            raise DestinationTransportError(f"Error de conexión con Google Drive: {e}")
        finally:
            media.stream().close()

        return f"gdrive:{created.get('id')}"
