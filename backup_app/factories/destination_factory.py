"""
Factory para crear el destino de almacenamiento configurado
"""
from typing import List
from ..destinations.base_destination import StorageDestination
from ..destinations.google_drive_destination import GoogleDriveDestination
from ..destinations.local_destination import LocalDestination
from ..destinations.s3_destination import S3Destination
from ..destinations.telegram_destination import TelegramDestination
from ..models import BackupConfiguration, StorageKind


class DestinationFactory:
    """Factory para crear destinos de almacenamiento (Factory Pattern)"""

    # Mapeo de tipos de almacenamiento a destinos
    _destinations = {
        StorageKind.LOCAL: LocalDestination,
        StorageKind.TELEGRAM: TelegramDestination,
        StorageKind.S3: S3Destination,
        StorageKind.GOOGLE_DRIVE: GoogleDriveDestination,
    }

    @classmethod
    def create(cls, config: BackupConfiguration) -> StorageDestination:
        """
        Crea el destino indicado por la configuración

        Args:
            config: Configuración de backup

        Returns:
            Instancia de StorageDestination

        Raises:
            KeyError: Si el tipo de almacenamiento no tiene destino registrado
        """
        destination_class = cls._destinations[config.storage]
        return destination_class.from_config(config)

    @classmethod
    def register_destination(cls, kind: StorageKind, destination_class: type):
        """
        Registra un nuevo destino (permite extender sin modificar - Open/Closed)

        Args:
            kind: Tipo de almacenamiento
            destination_class: Subclase de StorageDestination
        """
        cls._destinations[kind] = destination_class

    @classmethod
    def get_supported_kinds(cls) -> List[StorageKind]:
        """
        Obtiene lista de destinos soportados

        Returns:
            Lista de tipos de almacenamiento
        """
        return list(cls._destinations.keys())
