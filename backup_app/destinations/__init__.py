"""
Destinos de almacenamiento para los artefactos
"""
from .base_destination import StorageDestination
from .google_drive_destination import GoogleDriveDestination
from .local_destination import LocalDestination
from .s3_destination import S3Destination
from .telegram_destination import TelegramDestination

__all__ = [
    'StorageDestination',
    'GoogleDriveDestination',
    'LocalDestination',
    'S3Destination',
    'TelegramDestination'
]
