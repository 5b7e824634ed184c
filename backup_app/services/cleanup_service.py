"""
Servicio para eliminar artefactos transitorios (Single Responsibility)
"""
from ..logger import LoggerService
from ..models import Artifact


class CleanupService:
    """Elimina el archivo local de un artefacto después de enviarlo"""

    def __init__(self):
        """Inicializa el servicio de limpieza"""
        self.logger = LoggerService.get_logger("CleanupService")

    def discard(self, artifact: Artifact) -> bool:
        """
        Elimina el artefacto local. Los fallos nunca se propagan.

        Args:
            artifact: Artefacto a eliminar

        Returns:
            True si el archivo fue eliminado
        """
        try:
            artifact.path.unlink()
        except FileNotFoundError:
            # El destino local ya lo movió
            return False
        except OSError as e:
            self.logger.debug(f"No se pudo eliminar {artifact.name}: {e}")
            return False

        self.logger.debug(f"Artefacto local eliminado: {artifact.name}")
        return True
