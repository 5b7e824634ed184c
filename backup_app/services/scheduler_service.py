"""
Servicio de programación de tareas de backup (crontab del usuario)
"""
import shlex
import subprocess
import sys
from pathlib import Path
from typing import Optional
from ..config import Config
from ..exceptions import SchedulerInstallError
from ..logger import LoggerService


class SchedulerService:
    """Instala la ejecución periódica del backup en el crontab del usuario"""

    def __init__(self, executable: Optional[str] = None):
        """
        Inicializa el servicio de programación

        Args:
            executable: Comando que se invocará desde cron (default: el propio ejecutable)
        """
        self.executable = executable
        self.logger = LoggerService.get_logger("SchedulerService")

    def resolve_executable(self) -> str:
        """
        Obtiene la ruta absoluta del ejecutable actual

        Returns:
            Comando para invocar la aplicación. Si se ejecuta como script .py,
            se antepone el intérprete de Python actual.

        Raises:
            SchedulerInstallError: Si no se puede resolver la ruta
        """
        if self.executable:
            return self.executable

        try:
            script = Path(sys.argv[0]).resolve(strict=True)
        except (IndexError, OSError, RuntimeError) as e:
            raise SchedulerInstallError(f"No se pudo obtener la ruta del ejecutable: {e}")

        if script.suffix == '.py':
            python = Path(sys.executable).absolute()
            return f"{shlex.quote(str(python))} {shlex.quote(str(script))}"
        return shlex.quote(str(script))

    def build_entry(self, frequency: str, executable: str) -> str:
        """
        Construye la línea de crontab

        Args:
            frequency: Expresión cron
            executable: Comando a ejecutar

        Returns:
            Línea '<cron> <ejecutable> --backup'
        """
        return f"{frequency} {executable} {Config.CRON_FLAG}"

    def install(self, frequency: str) -> str:
        """
        Reemplaza el crontab del usuario con una única línea de backup

        Args:
            frequency: Expresión cron

        Returns:
            Línea instalada

        Raises:
            SchedulerInstallError: Si crontab no existe o termina con error
        """
        entry = self.build_entry(frequency, self.resolve_executable())

        try:
            result = subprocess.run(
                ['crontab', '-'],
                input=entry + "\n",
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True
            )
        except OSError as e:
            raise SchedulerInstallError(f"No se pudo ejecutar crontab: {e}")

        if result.returncode != 0:
            raise SchedulerInstallError(
                f"crontab falló ({result.returncode}): {(result.stderr or '').strip()}"
            )

        self.logger.info(f"Tarea programada instalada: {entry}")
        return entry
