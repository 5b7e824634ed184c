"""
Factory para crear estrategias de captura
"""
from typing import Optional
from ..models import Integration
from ..strategies.base_strategy import CaptureStrategy
from ..strategies.folder_strategy import FolderCaptureStrategy
from ..strategies.postgresql_strategy import PostgreSQLCaptureStrategy


class CaptureStrategyFactory:
    """Factory para crear estrategias de captura (Factory Pattern)"""

    # Mapeo de integraciones a estrategias
    _strategies = {
        Integration.POSTGRESQL: PostgreSQLCaptureStrategy,
        Integration.FOLDER: FolderCaptureStrategy,
    }

    @classmethod
    def create(cls, integration: Integration) -> Optional[CaptureStrategy]:
        """
        Crea una estrategia de captura según la integración

        Args:
            integration: Fuente a capturar (postgresql, folder)

        Returns:
            Instancia de CaptureStrategy o None si no está soportada
        """
        strategy_class = cls._strategies.get(Integration(integration))
        if strategy_class:
            return strategy_class()
        return None
