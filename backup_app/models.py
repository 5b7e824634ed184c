"""
Modelos de datos del sistema
"""
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional


class Integration(str, Enum):
    """Fuentes que se pueden respaldar"""
    POSTGRESQL = "postgresql"
    FOLDER = "folder"


class StorageKind(str, Enum):
    """Destinos de almacenamiento soportados"""
    LOCAL = "local"
    TELEGRAM = "telegram"
    S3 = "s3"
    GOOGLE_DRIVE = "google_drive"


# Orden fijo de captura, independiente del orden guardado
CAPTURE_ORDER = (Integration.POSTGRESQL, Integration.FOLDER)

# Campos opcionales de texto (se omiten del JSON si están vacíos)
_OPTIONAL_TEXT_FIELDS = (
    'postgres_url', 'folder_path', 'local_path', 'bot_token',
    's3_bucket', 's3_region', 's3_access_key', 's3_secret_key',
    'google_creds', 'google_folder_id',
)


@dataclass
class BackupConfiguration:
    """Configuración persistida de la instalación (una sola por usuario)"""
    integrations: List[Integration]
    frequency: str
    storage: StorageKind
    postgres_url: str = ""
    folder_path: str = ""
    local_path: str = ""
    bot_token: str = ""
    channel_id: int = 0
    s3_bucket: str = ""
    s3_region: str = ""
    s3_access_key: str = ""
    s3_secret_key: str = ""
    google_creds: str = ""
    google_folder_id: str = ""

    def __post_init__(self):
        """Validación después de inicialización"""
        self.integrations = [Integration(i) for i in self.integrations]
        self.storage = StorageKind(self.storage)

    def source_for(self, integration: Integration) -> str:
        """
        Devuelve el parámetro de origen de una integración

        Args:
            integration: Integración a consultar

        Returns:
            URL de conexión o ruta de carpeta
        """
        if integration is Integration.POSTGRESQL:
            return self.postgres_url
        return self.folder_path

    def to_dict(self) -> Dict:
        """Serializa omitiendo los campos vacíos"""
        data = {
            'integrations': [i.value for i in self.integrations],
            'frequency': self.frequency,
            'storage': self.storage.value,
        }
        for name in _OPTIONAL_TEXT_FIELDS + ('channel_id',):
            value = getattr(self, name)
            if value:
                data[name] = value
        return data

    @classmethod
    def from_dict(cls, data: Dict) -> 'BackupConfiguration':
        """
        Construye la configuración desde el diccionario leído del JSON

        Args:
            data: Diccionario deserializado

        Returns:
            BackupConfiguration

        Raises:
            ValueError: Si algún campo tiene un valor no soportado
        """
        if not isinstance(data, dict):
            raise ValueError("La configuración debe ser un objeto JSON")

        integrations = data.get('integrations')
        if integrations is None:
            integrations = []
        if not isinstance(integrations, list):
            raise ValueError("'integrations' debe ser una lista")

        if 'storage' not in data:
            raise ValueError("Falta el campo 'storage'")

        channel_id = data.get('channel_id')
        if channel_id is None:
            channel_id = 0
        if isinstance(channel_id, bool) or not isinstance(channel_id, int):
            raise ValueError("'channel_id' debe ser un entero")

        values = {}
        for name in ('frequency',) + _OPTIONAL_TEXT_FIELDS:
            # null equivale a un campo ausente
            value = data.get(name)
            if value is None:
                value = ""
            if not isinstance(value, str):
                raise ValueError(f"'{name}' debe ser texto")
            values[name] = value

        return cls(
            integrations=integrations,
            storage=data['storage'],
            channel_id=channel_id,
            **values
        )


@dataclass
class Artifact:
    """Archivo transitorio producido por una captura"""
    integration: Integration
    path: Path

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def size_bytes(self) -> int:
        return self.path.stat().st_size


@dataclass
class UploadResult:
    """Resultado de enviar un artefacto a su destino"""
    artifact_name: str
    destination: str
    success: bool
    location: Optional[str] = None
    error: Optional[str] = None
    duration_seconds: float = 0.0

    def __str__(self):
        if self.success:
            return f"✓ {self.artifact_name} -> {self.location} ({self.duration_seconds:.2f}s)"
        else:
            return f"✗ {self.artifact_name}: {self.error}"


@dataclass
class WizardDraft:
    """Respuestas acumuladas por el asistente antes de persistir"""
    integrations: List[Integration] = field(default_factory=list)
    frequency: str = ""
    storage: Optional[StorageKind] = None
    values: Dict = field(default_factory=dict)

    def build(self) -> BackupConfiguration:
        """Convierte el borrador en una configuración completa"""
        return BackupConfiguration(
            integrations=list(self.integrations),
            frequency=self.frequency,
            storage=self.storage,
            **self.values
        )
