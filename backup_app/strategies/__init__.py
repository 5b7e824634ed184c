"""
Estrategias de captura para cada fuente de backup
"""
from .base_strategy import CaptureStrategy
from .folder_strategy import FolderCaptureStrategy
from .postgresql_strategy import PostgreSQLCaptureStrategy

__all__ = [
    'CaptureStrategy',
    'FolderCaptureStrategy',
    'PostgreSQLCaptureStrategy'
]
