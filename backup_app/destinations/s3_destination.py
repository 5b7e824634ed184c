"""
Destino S3: sube el artefacto a un bucket con credenciales estáticas
"""
import re

import boto3
from boto3.exceptions import S3UploadFailedError
from botocore.exceptions import BotoCoreError, ClientError
from .base_destination import StorageDestination
from ..exceptions import (
    DestinationAuthError,
    DestinationError,
    DestinationNotFoundError,
    DestinationTransportError,
)
from ..models import Artifact, BackupConfiguration, StorageKind


class S3Destination(StorageDestination):
    """Sube artefactos a AWS S3 usando el nombre del archivo como clave"""

    kind = StorageKind.S3

    AUTH_ERROR_CODES = {
        'InvalidAccessKeyId',
        'SignatureDoesNotMatch',
        'AccessDenied',
        'InvalidToken',
        'ExpiredToken',
    }
    NOT_FOUND_ERROR_CODES = {'NoSuchBucket', '404'}

    def __init__(self, bucket: str, region: str, access_key: str, secret_key: str):
        super().__init__()
        self.bucket = bucket
        self.region = region
        self.access_key = access_key
        self.secret_key = secret_key

    @classmethod
    def from_config(cls, config: BackupConfiguration) -> 'S3Destination':
        return cls(
            bucket=config.s3_bucket,
            region=config.s3_region,
            access_key=config.s3_access_key,
            secret_key=config.s3_secret_key
        )

    def _client(self):
        return boto3.client(
            "s3",
            region_name=self.region,
            aws_access_key_id=self.access_key,
            aws_secret_access_key=self.secret_key
        )

    def upload(self, artifact: Artifact) -> str:
        key = artifact.name
        if not artifact.path.is_file():
            raise DestinationTransportError(f"No existe el artefacto {artifact.path}")

        try:
            s3_client = self._client()
            # Transferencia gestionada: multipart para archivos grandes
            s3_client.upload_file(str(artifact.path), self.bucket, key)
        except S3UploadFailedError as e:
            raise self._translate(self._error_code(e), e)
        except ClientError as e:
            raise self._translate(e.response.get('Error', {}).get('Code', ''), e)
        except BotoCoreError as e:
            raise DestinationTransportError(f"Error de conexión con S3: {e}")
        except OSError as e:
            raise DestinationTransportError(f"No se pudo leer {artifact.name}: {e}")

        return f"s3://{self.bucket}/{key}"

    @staticmethod
    def _error_code(error: S3UploadFailedError) -> str:
        """
        Obtiene el código de S3 del ClientError que envuelve la transferencia

        Args:
            error: Error de boto3 al subir el archivo

        Returns:
            Código de error (ej. NoSuchBucket) o cadena vacía
        """
        cause = error.__cause__ or error.__context__
        if isinstance(cause, ClientError):
            return cause.response.get('Error', {}).get('Code', '')
        match = re.search(r"An error occurred \((\w+)\)", str(error))
        return match.group(1) if match else ''

    def _translate(self, code: str, error: Exception) -> DestinationError:
        if code in self.NOT_FOUND_ERROR_CODES:
            return DestinationNotFoundError(f"El bucket {self.bucket} no existe: {error}")
        if code in self.AUTH_ERROR_CODES:
            return DestinationAuthError(f"Credenciales de S3 rechazadas: {error}")
        return DestinationTransportError(f"Error subiendo a S3: {error}")
