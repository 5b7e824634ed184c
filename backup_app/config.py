"""
Configuración centralizada del sistema de backup
"""
import logging
import os
from pathlib import Path
from dotenv import load_dotenv, find_dotenv

class Config:
    """Configuración centralizada del sistema"""

    ENV_FILE = find_dotenv(usecwd=True)

    # Variables opcionales de entorno (solo logging)
    load_dotenv(ENV_FILE)

    # Directorio por usuario donde vive la configuración
    APP_DIR = Path.home() / ".backup_app"
    CONFIG_FILE = APP_DIR / "config.json"

    LOG_DIR = Path(os.getenv("BACKUP_APP_LOG_DIR")) if os.getenv("BACKUP_APP_LOG_DIR") else (APP_DIR / "logs")

    LOG_LEVEL = getattr(logging, os.getenv("BACKUP_APP_LOG_LEVEL", "INFO").upper(), logging.INFO)
    LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    # Formato usado en el nombre de los artefactos
    TIMESTAMP_FORMAT = "%Y-%m-%d_%H-%M-%S"

    # Bandera que activa el modo de ejecución de backup
    CRON_FLAG = "--backup"

    DAILY_SCHEDULE = "0 0 * * *"     # Todos los días a medianoche
    WEEKLY_SCHEDULE = "0 0 * * 0"    # Domingos a medianoche
    MONTHLY_SCHEDULE = "0 0 1 * *"   # Día 1 de cada mes a medianoche

    # Permisos del archivo de configuración (contiene credenciales en claro)
    CONFIG_FILE_MODE = 0o600

    @classmethod
    def ensure_directories(cls):
        """Crea los directorios necesarios si no existen"""
        cls.LOG_DIR.mkdir(parents=True, exist_ok=True)
