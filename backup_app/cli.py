"""
Interfaz de línea de comandos: configuración interactiva o ejecución del backup
"""
import argparse
import sys
from typing import Optional
from .config import Config
from .exceptions import (
    CaptureError,
    ConfigurationError,
    InvalidInputError,
    SchedulerInstallError,
)
from .logger import LoggerService
from .repositories.config_repository import ConfigRepository
from .services.backup_service import BackupService
from .services.configuration_wizard import ConfigurationWizard
from .services.scheduler_service import SchedulerService


def parse_arguments(argv=None):
    """
    Parsea argumentos de línea de comandos

    Returns:
        Namespace con los argumentos parseados
    """
    parser = argparse.ArgumentParser(
        description='Backups programados de PostgreSQL y carpetas',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Ejemplos:
  python main.py                    # Asistente de configuración
  python main.py --backup           # Ejecutar el backup (lo usa cron)
        """
    )

    parser.add_argument(
        Config.CRON_FLAG,
        dest='backup',
        action='store_true',
        help='Ejecutar el backup con la configuración guardada'
    )

    return parser.parse_args(argv)


def perform_backup(config_repo: ConfigRepository) -> int:
    """
    Modo ejecución: carga la configuración y corre el pipeline

    Args:
        config_repo: Repositorio de configuración

    Returns:
        Código de salida (0 si todo fue enviado)
    """
    logger = LoggerService.get_logger("Main")

    try:
        config = config_repo.load()
    except ConfigurationError as e:
        logger.error(f"Error cargando la configuración: {e}")
        return 1

    try:
        results = BackupService(config).run()
    except CaptureError as e:
        logger.error(f"Backup abortado: {e}")
        return 1

    failed = sum(1 for r in results if not r.success)
    return 1 if failed > 0 else 0


def configure_backup(
    config_repo: ConfigRepository,
    wizard: Optional[ConfigurationWizard] = None,
    scheduler: Optional[SchedulerService] = None
) -> int:
    """
    Modo configuración: asistente, persistencia e instalación en cron

    Args:
        config_repo: Repositorio de configuración
        wizard: Asistente a usar (default: interactivo por consola)
        scheduler: Servicio de crontab (default: ejecutable actual)

    Returns:
        Código de salida
    """
    logger = LoggerService.get_logger("Main")
    wizard = wizard or ConfigurationWizard()
    scheduler = scheduler or SchedulerService()

    try:
        config = wizard.run()
    except InvalidInputError as e:
        logger.error(f"{e}. Saliendo sin cambios.")
        return 1

    try:
        config_repo.save(config)
    except ConfigurationError as e:
        logger.error(f"Error guardando la configuración: {e}")
        return 1

    try:
        scheduler.install(config.frequency)
    except SchedulerInstallError as e:
        logger.error(f"Error programando la tarea cron: {e}")
        return 1

    logger.info("Backup configurado exitosamente.")
    return 0


def main(argv=None):
    """Función principal"""
    args = parse_arguments(argv)
    config_repo = ConfigRepository()

    if args.backup:
        sys.exit(perform_backup(config_repo))

    sys.exit(configure_backup(config_repo))
