"""
Servicio principal que orquesta los backups
"""
from pathlib import Path
from typing import List, Optional
from ..exceptions import CaptureError
from ..factories.destination_factory import DestinationFactory
from ..factories.strategy_factory import CaptureStrategyFactory
from ..logger import LoggerService
from ..models import CAPTURE_ORDER, Artifact, BackupConfiguration, UploadResult
from .cleanup_service import CleanupService


class BackupService:
    """Servicio principal que orquesta los backups"""

    def __init__(self, config: BackupConfiguration, work_dir: Optional[Path] = None):
        """
        Inicializa el servicio de backup

        Args:
            config: Configuración cargada del repositorio
            work_dir: Directorio donde se escriben los artefactos (default: cwd)
        """
        self.config = config
        self.work_dir = Path(work_dir) if work_dir else Path.cwd()
        self.logger = LoggerService.get_logger("BackupService")
        self.cleanup_service = CleanupService()

    def capture_all(self) -> List[Artifact]:
        """
        Captura las fuentes configuradas en orden fijo (postgresql, folder)

        Returns:
            Lista de artefactos generados

        Raises:
            CaptureError: En la primera captura fallida. Los artefactos previos
                quedan en disco sin enviar.
        """
        artifacts = []

        for integration in CAPTURE_ORDER:
            if integration not in self.config.integrations:
                continue

            strategy = CaptureStrategyFactory.create(integration)
            if not strategy:
                raise CaptureError(f"Integración no soportada: {integration.value}")

            source = self.config.source_for(integration)
            artifacts.append(strategy.execute_capture(source, self.work_dir))

        return artifacts

    def run(self) -> List[UploadResult]:
        """
        Ejecuta el pipeline completo: captura, envío y limpieza

        Returns:
            Lista de resultados de envío, uno por artefacto

        Raises:
            CaptureError: Si alguna captura falla (no se envía nada)
        """
        self.logger.info("=" * 70)
        self.logger.info("INICIANDO PROCESO DE BACKUP")
        self.logger.info("=" * 70)

        artifacts = self.capture_all()
        destination = DestinationFactory.create(self.config)

        results = []
        for artifact in artifacts:
            self.logger.info("-" * 70)
            result = None
            try:
                result = destination.execute_upload(artifact)
            finally:
                if self._stored_in_place(artifact, result):
                    self.logger.info(f"El artefacto ya está en su destino: {artifact.path}")
                else:
                    self.cleanup_service.discard(artifact)
            results.append(result)

        self._print_summary(results)
        return results

    def _stored_in_place(self, artifact: Artifact, result: Optional[UploadResult]) -> bool:
        """True si el destino es el mismo archivo local (local_path == directorio de trabajo)"""
        if result is None or not result.success or not result.location:
            return False
        return Path(result.location).resolve() == artifact.path.resolve()

    def _print_summary(self, results: List[UploadResult]):
        """
        Imprime resumen de la operación de backup

        Args:
            results: Lista de resultados
        """
        success_count = sum(1 for r in results if r.success)
        failed_count = len(results) - success_count
        total_time = sum(r.duration_seconds for r in results)

        self.logger.info("=" * 70)
        self.logger.info("RESUMEN DEL PROCESO DE BACKUP")
        self.logger.info("=" * 70)

        for result in results:
            if result.success:
                self.logger.info(str(result))
            else:
                self.logger.error(str(result))

        self.logger.info("-" * 70)
        self.logger.info(f"Destino: {self.config.storage.value}")
        self.logger.info(f"Artefactos enviados: {success_count}")
        self.logger.info(f"Envíos fallidos: {failed_count}")
        self.logger.info(f"Tiempo total de envío: {total_time:.2f}s")
        self.logger.info("=" * 70)

        if failed_count > 0:
            self.logger.warning(
                f"ATENCIÓN: {failed_count} envío(s) fallaron. "
                "Revisa los errores arriba."
            )
