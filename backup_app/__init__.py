"""
Utilidad de backups programados: PostgreSQL y carpetas hacia disco local,
Telegram, S3 o Google Drive
"""
__version__ = "1.0.0"

from .config import Config
from .logger import LoggerService

__all__ = ['Config', 'LoggerService']
