"""
Destino base para el envío de artefactos (Strategy Pattern)
"""
import time
from abc import ABC, abstractmethod
from ..exceptions import DestinationError
from ..logger import LoggerService
from ..models import Artifact, BackupConfiguration, StorageKind, UploadResult


class StorageDestination(ABC):
    """Interfaz común: entregar un artefacto a un destino"""

    kind: StorageKind

    def __init__(self):
        """Inicializa el destino"""
        self.logger = LoggerService.get_logger(self.__class__.__name__)

    @classmethod
    @abstractmethod
    def from_config(cls, config: BackupConfiguration) -> 'StorageDestination':
        """
        Crea el destino con los parámetros guardados en la configuración

        Args:
            config: Configuración de backup

        Returns:
            Instancia del destino
        """
        pass

    @abstractmethod
    def upload(self, artifact: Artifact) -> str:
        """
        Entrega el artefacto al destino

        Args:
            artifact: Artefacto a enviar

        Returns:
            Ubicación del artefacto en el destino

        Raises:
            DestinationError: Si el destino rechaza o no recibe el artefacto
        """
        pass

    def execute_upload(self, artifact: Artifact) -> UploadResult:
        """
        Template method para enviar el artefacto con medición de tiempo.
        Los errores se devuelven en el resultado, no se propagan.

        Args:
            artifact: Artefacto a enviar

        Returns:
            Resultado del envío
        """
        self.logger.info(f"Enviando {artifact.name} a {self.kind.value}...")
        start_time = time.time()

        try:
            location = self.upload(artifact)
        except DestinationError as e:
            self.logger.error(f"Error enviando {artifact.name} a {self.kind.value}: {e}")
            return self._failed(artifact, f"{e.__class__.__name__}: {e}", start_time)
        except Exception as e:
            self.logger.error(f"Error inesperado enviando {artifact.name}: {e}", exc_info=True)
            return self._failed(artifact, str(e), start_time)

        duration = time.time() - start_time
        self.logger.info(f"Envío exitoso: {artifact.name} -> {location} ({duration:.2f}s)")
        return UploadResult(
            artifact_name=artifact.name,
            destination=self.kind.value,
            success=True,
            location=location,
            duration_seconds=duration
        )

    def _failed(self, artifact: Artifact, error: str, start_time: float) -> UploadResult:
        return UploadResult(
            artifact_name=artifact.name,
            destination=self.kind.value,
            success=False,
            error=error,
            duration_seconds=time.time() - start_time
        )
