"""
Estrategia de captura para carpetas del sistema de archivos
"""
from pathlib import Path
from typing import List
from .base_strategy import CaptureStrategy
from ..models import Integration


class FolderCaptureStrategy(CaptureStrategy):
    """Empaqueta una carpeta en un tar.gz"""

    integration = Integration.FOLDER
    prefix = "folder_backup"
    extension = ".tar.gz"

    def build_command(self, source: str, output_file: Path) -> List[str]:
        return ['tar', '-czf', str(output_file), source]
