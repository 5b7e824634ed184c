"""
Estrategia base para capturas (Strategy Pattern)
"""
import shutil
import subprocess
import time
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import List
from ..config import Config
from ..exceptions import CaptureError
from ..logger import LoggerService
from ..models import Artifact, Integration


class CaptureStrategy(ABC):
    """Interfaz abstracta para estrategias de captura (Open/Closed Principle)"""

    integration: Integration
    prefix: str
    extension: str

    def __init__(self):
        """Inicializa la estrategia"""
        self.logger = LoggerService.get_logger(self.__class__.__name__)

    @abstractmethod
    def build_command(self, source: str, output_file: Path) -> List[str]:
        """
        Construye la línea de comandos de la herramienta externa

        Args:
            source: URL de conexión o ruta de origen
            output_file: Archivo de salida del artefacto

        Returns:
            Lista de argumentos para subprocess
        """
        pass

    def output_name(self, moment: datetime) -> str:
        """Nombre del artefacto: prefijo + timestamp + extensión"""
        return f"{self.prefix}_{moment.strftime(Config.TIMESTAMP_FORMAT)}{self.extension}"

    def capture(self, source: str, output_dir: Path) -> Artifact:
        """
        Ejecuta la herramienta externa y espera a que termine

        Args:
            source: URL de conexión o ruta de origen
            output_dir: Directorio donde se escribe el artefacto

        Returns:
            Artefacto generado

        Raises:
            CaptureError: Si la herramienta no existe o termina con error
        """
        output_file = Path(output_dir) / self.output_name(datetime.now())
        cmd = self.build_command(source, output_file)

        tool_error = self._validate_tools([cmd[0]])
        if tool_error:
            raise CaptureError(tool_error)

        try:
            result = subprocess.run(
                cmd,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.PIPE,
                text=True
            )
        except OSError as e:
            self._discard_partial(output_file)
            raise CaptureError(f"No se pudo ejecutar {cmd[0]}: {e}")

        if result.returncode != 0:
            # Limpiar archivo de salida en caso de error
            self._discard_partial(output_file)
            detail = (result.stderr or "").strip() or f"código de salida {result.returncode}"
            raise CaptureError(f"{cmd[0]} falló: {detail}")

        return Artifact(integration=self.integration, path=output_file)

    def execute_capture(self, source: str, output_dir: Path) -> Artifact:
        """
        Template method para ejecutar la captura con medición de tiempo

        Args:
            source: URL de conexión o ruta de origen
            output_dir: Directorio donde se escribe el artefacto

        Returns:
            Artefacto generado

        Raises:
            CaptureError: Si la captura falla por cualquier motivo
        """
        self.logger.info(f"Iniciando captura de {self.integration.value}...")
        start_time = time.time()

        try:
            artifact = self.capture(source, output_dir)
        except CaptureError as e:
            self.logger.error(f"Captura fallida: {e}")
            raise
        except Exception as e:
            self.logger.error(f"Error al ejecutar captura: {str(e)}")
            raise CaptureError(str(e)) from e

        duration = time.time() - start_time
        file_size = artifact.size_bytes / (1024 * 1024)  # MB
        self.logger.info(
            f"Captura exitosa: {artifact.name} "
            f"({file_size:.2f} MB, {duration:.2f}s)"
        )
        return artifact

    def _discard_partial(self, output_file: Path):
        if output_file.exists():
            output_file.unlink()

    def _validate_tools(self, tools: list):
        """
        Valida que las herramientas necesarias estén disponibles

        Args:
            tools: Lista de herramientas requeridas

        Returns:
            None si todo está OK, mensaje de error en caso contrario
        """
        for tool in tools:
            if not shutil.which(tool):
                return f"La herramienta {tool} no está instalada"
        return None
