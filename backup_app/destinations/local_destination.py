"""
Destino local: mueve el artefacto a un directorio del mismo equipo
"""
import errno
from pathlib import Path
from .base_destination import StorageDestination
from ..exceptions import (
    DestinationAuthError,
    DestinationNotFoundError,
    DestinationTransportError,
)
from ..models import Artifact, BackupConfiguration, StorageKind


class LocalDestination(StorageDestination):
    """Mueve el artefacto con semántica de rename (atómico en el mismo filesystem)"""

    kind = StorageKind.LOCAL

    def __init__(self, target_dir: str):
        super().__init__()
        self.target_dir = Path(target_dir)

    @classmethod
    def from_config(cls, config: BackupConfiguration) -> 'LocalDestination':
        return cls(config.local_path)

    def upload(self, artifact: Artifact) -> str:
        if not self.target_dir.is_dir():
            raise DestinationNotFoundError(f"El directorio destino no existe: {self.target_dir}")

        target = self.target_dir / artifact.name
        try:
            artifact.path.rename(target)
        except PermissionError as e:
            raise DestinationAuthError(f"Sin permisos de escritura en {self.target_dir}: {e}")
        except OSError as e:
            if e.errno == errno.EXDEV:
                raise DestinationTransportError(
                    f"{self.target_dir} está en otro sistema de archivos; "
                    "el movimiento no puede ser atómico"
                )
            raise DestinationTransportError(f"No se pudo mover {artifact.name}: {e}")

        return str(target)
