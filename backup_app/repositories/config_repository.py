"""
Repositorio para manejar configuración (Dependency Inversion)
"""
import json
import os
from pathlib import Path
from typing import Optional
from ..config import Config
from ..exceptions import (
    ConfigDecodeError,
    ConfigNotFoundError,
    ConfigurationError,
    ConfigWriteError,
)
from ..logger import LoggerService
from ..models import BackupConfiguration


class ConfigRepository:
    """Repositorio para leer y escribir el archivo de configuración"""

    def __init__(self, config_file: Optional[Path] = None):
        """
        Inicializa el repositorio de configuración

        Args:
            config_file: Ruta al archivo de configuración (opcional)
        """
        self.config_file = Path(config_file) if config_file else Config.CONFIG_FILE
        self.logger = LoggerService.get_logger("ConfigRepository")

    def load(self) -> BackupConfiguration:
        """
        Carga configuración desde archivo JSON

        Returns:
            Configuración de backup

        Raises:
            ConfigNotFoundError: Si el archivo no existe
            ConfigDecodeError: Si el contenido no es válido
        """
        try:
            with open(self.config_file, "r", encoding='utf-8') as f:
                raw_config = json.load(f)
        except FileNotFoundError:
            raise ConfigNotFoundError(
                f"El archivo de configuración no existe: {self.config_file}"
            )
        except json.JSONDecodeError as e:
            raise ConfigDecodeError(f"Error al parsear JSON en {self.config_file}: {e}")
        except OSError as e:
            raise ConfigurationError(f"Error al leer {self.config_file}: {e}")

        try:
            config = BackupConfiguration.from_dict(raw_config)
        except (ValueError, TypeError) as e:
            raise ConfigDecodeError(f"Configuración inválida en {self.config_file}: {e}")

        self.logger.info(f"Configuración cargada exitosamente: {self.config_file}")
        return config

    def save(self, config: BackupConfiguration) -> None:
        """
        Guarda configuración en archivo JSON con permisos solo para el dueño

        Args:
            config: Configuración a persistir

        Raises:
            ConfigWriteError: Si no se pudo crear el directorio o escribir el archivo
        """
        try:
            self.config_file.parent.mkdir(parents=True, exist_ok=True)
            fd = os.open(
                self.config_file,
                os.O_CREAT | os.O_WRONLY | os.O_TRUNC,
                Config.CONFIG_FILE_MODE
            )
            with os.fdopen(fd, "w", encoding='utf-8') as f:
                json.dump(config.to_dict(), f, indent=4, ensure_ascii=False)
            # Un archivo previo conserva sus permisos originales
            os.chmod(self.config_file, Config.CONFIG_FILE_MODE)
        except OSError as e:
            raise ConfigWriteError(f"Error al guardar la configuración: {e}")

        self.logger.info(f"Configuración guardada exitosamente: {self.config_file}")
